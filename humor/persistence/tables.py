"""SQLAlchemy table definitions for the caption store.

These mirror the schema owned by the hosted database. Row-level security
policies live in the database and are not modelled here.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    SmallInteger,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# PROFILES TABLE (id matches the authenticated user id)
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("first_name", String(255), nullable=True),
    Column("last_name", String(255), nullable=True),
    Column("email", String(255), nullable=True),
    Column(
        "created_datetime_utc",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
)

# ============================================================================
# IMAGES TABLE
# ============================================================================
images_table = Table(
    "images",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("url", Text, nullable=True),
    Column("image_description", Text, nullable=True),
    Column(
        "created_datetime_utc",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
)

# ============================================================================
# CAPTIONS TABLE
# ============================================================================
captions_table = Table(
    "captions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "created_datetime_utc",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
    Column("content", Text, nullable=True),
    Column("is_public", Boolean, nullable=False, server_default="false"),
    Column("profile_id", UUID, ForeignKey("profiles.id"), nullable=False),
    Column("image_id", UUID, ForeignKey("images.id"), nullable=False),
    Column("is_featured", Boolean, nullable=False, server_default="false"),
    Column("like_count", Integer, nullable=False, server_default="0"),
)

Index("idx_captions_is_public", captions_table.c.is_public)

# ============================================================================
# CAPTION VOTES TABLE
# ============================================================================
caption_votes_table = Table(
    "caption_votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "caption_id",
        UUID,
        ForeignKey("captions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "profile_id",
        UUID,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("vote_value", SmallInteger, nullable=False),
    Column(
        "created_datetime_utc",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
    Column("modified_datetime_utc", TIMESTAMP(timezone=True), nullable=True),
    UniqueConstraint("caption_id", "profile_id", name="unique_caption_vote"),
    CheckConstraint("vote_value IN (-1, 1)", name="vote_value_up_or_down"),
)

Index(
    "idx_caption_votes_profile_created",
    caption_votes_table.c.profile_id,
    caption_votes_table.c.created_datetime_utc,
)
Index("idx_caption_votes_caption_id", caption_votes_table.c.caption_id)

# ============================================================================
# CAPTION EXAMPLES TABLE
# ============================================================================
caption_examples_table = Table(
    "caption_examples",
    metadata,
    Column("id", Integer, primary_key=True),
    Column(
        "created_datetime_utc",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
    Column("modified_datetime_utc", TIMESTAMP(timezone=True), nullable=True),
    Column("image_description", Text, nullable=False),
    Column("caption", Text, nullable=False),
    Column("explanation", Text, nullable=False),
    Column("priority", Integer, nullable=False, server_default="0"),
    Column("image_id", UUID, ForeignKey("images.id"), nullable=True),
)
