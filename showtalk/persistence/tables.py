"""SQLAlchemy table definitions for showtalk comments.

These tables match the schema defined in Alembic migrations. Column types are
kept dialect-neutral so the same definitions run on PostgreSQL and SQLite.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)

# Metadata object for all tables
metadata = MetaData()

# Written by the first phase of a comment create and replaced by the second
# phase within the same transaction
PLACEHOLDER_PATH = ""

# ============================================================================
# USERS TABLE (profile mirror of the identity provider)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String(255), primary_key=True),  # Identity provider user id
    Column("username", String(255), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
)

Index("idx_users_username", users_table.c.username)

# ============================================================================
# DISCUSSION COMMENTS TABLE
# ============================================================================
discussion_comments_table = Table(
    "discussion_comments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("discussion_id", Integer, nullable=False),
    Column("user_id", String(255), ForeignKey("users.id"), nullable=False),
    Column("content", Text, nullable=False),
    Column(
        "parent_id",
        Integer,
        ForeignKey("discussion_comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("depth", Integer, nullable=False, default=0),
    Column("path", String(255), nullable=False),  # e.g. 000012.000045
    Column("spoiler", Boolean, nullable=False, default=False),
    Column("is_deleted", Boolean, nullable=False, default=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
    CheckConstraint("depth >= 0", name="depth_non_negative"),
)

Index(
    "idx_discussion_comments_level",
    discussion_comments_table.c.discussion_id,
    discussion_comments_table.c.parent_id,
    discussion_comments_table.c.created_at,
)
Index("idx_discussion_comments_path", discussion_comments_table.c.path)
Index("idx_discussion_comments_user_id", discussion_comments_table.c.user_id)

# ============================================================================
# COMMENT VOTES TABLE
# ============================================================================
discussion_comment_votes_table = Table(
    "discussion_comment_votes",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "comment_id",
        Integer,
        ForeignKey("discussion_comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", String(255), nullable=False),
    Column("value", String(10), nullable=False),  # UPVOTE / DOWNVOTE
    Column("created_at", DateTime(timezone=True), nullable=False),
    UniqueConstraint("comment_id", "user_id", name="unique_comment_vote"),
    CheckConstraint("value IN ('UPVOTE', 'DOWNVOTE')", name="vote_value_valid"),
)

Index("idx_comment_votes_comment_id", discussion_comment_votes_table.c.comment_id)

# ============================================================================
# REACTION TYPES TABLE
# ============================================================================
reaction_types_table = Table(
    "reaction_types",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(50), nullable=False, unique=True),
    Column("emoji", String(32), nullable=True),
    Column("category", String(50), nullable=True),
)

# ============================================================================
# COMMENT REACTIONS TABLE
# ============================================================================
discussion_comment_reactions_table = Table(
    "discussion_comment_reactions",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column(
        "comment_id",
        Integer,
        ForeignKey("discussion_comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", String(255), nullable=False),
    Column(
        "reaction_type_id",
        Integer,
        ForeignKey("reaction_types.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("created_at", DateTime(timezone=True), nullable=False),
    UniqueConstraint(
        "comment_id", "user_id", "reaction_type_id", name="unique_comment_reaction"
    ),
)

Index(
    "idx_comment_reactions_comment_id",
    discussion_comment_reactions_table.c.comment_id,
)
