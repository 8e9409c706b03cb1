"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """A hosted service (identity, storage, database) failed or was unreachable.

    The request may succeed when retried.
    """

    pass
