"""Profile entity.

One profile per account. The id is the account id issued by the identity
service.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from tapestry.domain.model.common import DomainModel
from tapestry.domain.value import UserId


class Profile(DomainModel):
    """Public profile of an account."""

    id: UserId
    full_name: Optional[str] = Field(default=None, max_length=255)
    avatar_url: Optional[str] = None
    email: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
