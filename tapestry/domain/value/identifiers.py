"""Strongly typed identifiers for Tapestry domain entities.

Identifiers are opaque strings assigned by the data store (or the identity
service, for accounts). NewType keeps the different kinds apart.
"""

from typing import NewType

UserId = NewType("UserId", str)
PostId = NewType("PostId", str)
CommentId = NewType("CommentId", str)
