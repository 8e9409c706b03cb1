"""SQLAlchemy table definitions for Tapestry.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# PROFILES TABLE (one row per identity-service account)
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID(as_uuid=False), primary_key=True),  # Account id
    Column("full_name", String(255), nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column("email", String(255), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column(
        "id",
        UUID(as_uuid=False),
        primary_key=True,
        server_default="gen_random_uuid()",
    ),
    Column("user_id", UUID(as_uuid=False), nullable=False),
    Column("content", Text, nullable=False),
    Column("section", String(20), nullable=True),  # Life-area, NULL for dashboard
    Column("category", String(100), nullable=True),
    Column("category_emoji", String(16), nullable=True),
    Column("category_part", String(50), nullable=True),
    Column("subcategory", String(100), nullable=True),
    Column("subcategory_emoji", String(16), nullable=True),
    Column("photo_url", Text, nullable=True),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("likes >= 0", name="likes_non_negative"),
)

Index("idx_posts_user_id", posts_table.c.user_id)
Index("idx_posts_section", posts_table.c.section)
Index("idx_posts_created_at", posts_table.c.created_at)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
# parent_id has no foreign key: deleting a comment leaves its replies behind
comments_table = Table(
    "comments",
    metadata,
    Column(
        "id",
        UUID(as_uuid=False),
        primary_key=True,
        server_default="gen_random_uuid()",
    ),
    Column(
        "post_id",
        UUID(as_uuid=False),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", UUID(as_uuid=False), nullable=False),
    Column("parent_id", UUID(as_uuid=False), nullable=True),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_comments_post_id_created_at",
    comments_table.c.post_id,
    comments_table.c.created_at,
)
Index("idx_comments_parent_id", comments_table.c.parent_id)
