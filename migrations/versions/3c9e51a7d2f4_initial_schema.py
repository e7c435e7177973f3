"""initial_schema

Create the comment threading schema:
- Users (profile mirror of the identity provider)
- Discussion comments (materialized-path threads, depth capped in the app)
- Comment votes (one live up/down vote per user and comment)
- Reaction types and comment reactions

Revision ID: 3c9e51a7d2f4
Revises:
Create Date: 2026-10-12 14:08:51.204913

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c9e51a7d2f4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.String(255), nullable=False),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_users_username", "users", ["username"])

    # ========================================================================
    # DISCUSSION_COMMENTS table
    # ========================================================================
    op.create_table(
        "discussion_comments",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("discussion_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("parent_id", sa.Integer(), nullable=True),
        sa.Column("depth", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("path", sa.String(255), nullable=False),
        sa.Column("spoiler", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.ForeignKeyConstraint(
            ["parent_id"], ["discussion_comments.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("depth >= 0", name="depth_non_negative"),
    )

    op.create_index(
        "idx_discussion_comments_level",
        "discussion_comments",
        ["discussion_id", "parent_id", "created_at"],
    )
    op.create_index("idx_discussion_comments_user_id", "discussion_comments", ["user_id"])
    # text_pattern_ops lets LIKE 'prefix%' use the index under any collation
    op.execute(
        "CREATE INDEX idx_discussion_comments_path "
        "ON discussion_comments (path text_pattern_ops)"
    )

    # ========================================================================
    # DISCUSSION_COMMENT_VOTES table
    # ========================================================================
    op.create_table(
        "discussion_comment_votes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("comment_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("value", sa.String(10), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(
            ["comment_id"], ["discussion_comments.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("comment_id", "user_id", name="unique_comment_vote"),
        sa.CheckConstraint(
            "value IN ('UPVOTE', 'DOWNVOTE')", name="vote_value_valid"
        ),
    )
    op.create_index(
        "idx_comment_votes_comment_id", "discussion_comment_votes", ["comment_id"]
    )

    # ========================================================================
    # REACTION_TYPES table
    # ========================================================================
    op.create_table(
        "reaction_types",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("emoji", sa.String(32), nullable=True),
        sa.Column("category", sa.String(50), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )

    # ========================================================================
    # DISCUSSION_COMMENT_REACTIONS table
    # ========================================================================
    op.create_table(
        "discussion_comment_reactions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("comment_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("reaction_type_id", sa.Integer(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(
            ["comment_id"], ["discussion_comments.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["reaction_type_id"], ["reaction_types.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "comment_id",
            "user_id",
            "reaction_type_id",
            name="unique_comment_reaction",
        ),
    )
    op.create_index(
        "idx_comment_reactions_comment_id",
        "discussion_comment_reactions",
        ["comment_id"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("discussion_comment_reactions")
    op.drop_table("reaction_types")
    op.drop_table("discussion_comment_votes")
    op.execute("DROP INDEX IF EXISTS idx_discussion_comments_path")
    op.drop_table("discussion_comments")
    op.drop_table("users")
