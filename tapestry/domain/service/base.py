"""Base class for domain services."""


class Service:
    """Base class for domain services.

    Services hold the rules that span entities (a reply must stay inside its
    post, only the author deletes a comment) and wrap repository calls in
    logfire spans.
    """

    pass
