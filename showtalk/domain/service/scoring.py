"""Comment scoring.

Two ranking keys are derived from live vote counts:

- net score (``up - down``), used by the "top" sort
- Wilson score lower bound, used by the "best" sort

The Wilson bound answers "given these votes, what approval rate can we be
80% sure the comment has at least?". A comment with 1 up / 0 down ranks
below one with 40 up / 5 down, unlike a plain ratio.
"""

import math
from typing import Iterable

from pydantic import computed_field

from showtalk.domain.model.common import DomainModel
from showtalk.domain.model.vote import Vote
from showtalk.domain.value import VoteValue

# z for an 80% confidence level
WILSON_Z = 1.281551565545


def _check_counts(upvotes: int, downvotes: int) -> None:
    if upvotes < 0 or downvotes < 0:
        raise ValueError(
            f"Vote counts must be non-negative (got {upvotes}, {downvotes})"
        )


def net_score(upvotes: int, downvotes: int) -> int:
    """Plain net tally."""
    _check_counts(upvotes, downvotes)
    return upvotes - downvotes


def wilson_score(upvotes: int, downvotes: int, z: float = WILSON_Z) -> float:
    """Lower bound of the Wilson score interval for the approval proportion.

    Args:
        upvotes: Number of upvotes
        downvotes: Number of downvotes
        z: Standard normal quantile of the confidence level

    Returns:
        A value in [0, 1]; 0 when there are no votes
    """
    _check_counts(upvotes, downvotes)
    n = upvotes + downvotes
    if n == 0:
        return 0.0

    p = upvotes / n
    z2 = z * z
    numerator = p + z2 / (2 * n) - z * math.sqrt((p * (1 - p) + z2 / (4 * n)) / n)
    denominator = 1 + z2 / n
    # Rounding can leave the bound a hair outside [0, 1]
    return min(1.0, max(0.0, numerator / denominator))


class VoteTally(DomainModel):
    """Vote counts for one comment with the derived ranking keys."""

    upvotes: int = 0
    downvotes: int = 0

    @computed_field  # type: ignore[prop-decorator]
    @property
    def score(self) -> int:
        return net_score(self.upvotes, self.downvotes)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def wilson_score(self) -> float:
        return wilson_score(self.upvotes, self.downvotes)


def tally_votes(votes: Iterable[Vote]) -> VoteTally:
    """Count upvotes and downvotes in a vote set."""
    upvotes = 0
    downvotes = 0
    for vote in votes:
        if vote.value == VoteValue.UPVOTE:
            upvotes += 1
        elif vote.value == VoteValue.DOWNVOTE:
            downvotes += 1
    return VoteTally(upvotes=upvotes, downvotes=downvotes)
