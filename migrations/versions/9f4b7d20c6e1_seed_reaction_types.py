"""seed_reaction_types

Revision ID: 9f4b7d20c6e1
Revises: 3c9e51a7d2f4
Create Date: 2026-10-12 14:31:07.518302

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "9f4b7d20c6e1"
down_revision: Union[str, Sequence[str], None] = "3c9e51a7d2f4"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


REACTION_TYPES = [
    # Positive
    ("slay", "💅", "positive"),
    ("periodt", "💯", "positive"),
    ("yasss", "✨", "positive"),
    ("queen", "👑", "positive"),
    ("king", "👑", "positive"),
    ("iconic", "🌟", "positive"),
    ("serve", "🔥", "positive"),
    ("crown", "👑", "positive"),
    # Negative
    ("gagged", "😱", "negative"),
    ("pissed", "😤", "negative"),
    ("cringe", "😬", "negative"),
    ("mess", "💀", "negative"),
    ("trash", "🗑️", "negative"),
    ("bye", "👋", "negative"),
    ("nope", "🙅", "negative"),
    ("ew", "🤢", "negative"),
    # Emotional
    ("crying", "😭", "emotional"),
    ("dead", "💀", "emotional"),
    ("screaming", "😱", "emotional"),
    ("shook", "😨", "emotional"),
    ("wig", "💇‍♀️", "emotional"),
    ("tea", "☕", "emotional"),
    ("spill", "🫖", "emotional"),
    ("receipts", "🧾", "emotional"),
    # Reality TV
    ("drama", "🎭", "reality-tv"),
    ("plot", "🤔", "reality-tv"),
    ("alliance", "🤝", "reality-tv"),
    ("betrayal", "🗡️", "reality-tv"),
    ("elimination", "🚪", "reality-tv"),
    ("immunity", "🛡️", "reality-tv"),
    ("challenge", "🏆", "reality-tv"),
    ("confessional", "🎤", "reality-tv"),
]


def upgrade() -> None:
    """Seed the reaction type catalogue."""
    reaction_types_table = sa.table(
        "reaction_types",
        sa.column("name", sa.String),
        sa.column("emoji", sa.String),
        sa.column("category", sa.String),
    )

    op.bulk_insert(
        reaction_types_table,
        [
            {"name": name, "emoji": emoji, "category": category}
            for name, emoji, category in REACTION_TYPES
        ],
    )


def downgrade() -> None:
    """Remove seeded reaction types."""
    names = ", ".join(f"'{name}'" for name, _, _ in REACTION_TYPES)
    op.execute(f"DELETE FROM reaction_types WHERE name IN ({names})")
