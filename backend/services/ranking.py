"""Ranking and threshold filtering for scored results.

Scoring and filtering are separate stages: a ranked list can be re-filtered
with a different minimum without recomputing any score.
"""

from collections.abc import Callable, Sequence
from typing import Any, Protocol, TypeVar


class _HasScore(Protocol):
    @property
    def score(self) -> int: ...


T = TypeVar("T", bound=_HasScore)

# (lower bound, label), highest first
MATCH_LABELS: list[tuple[int, str]] = [
    (80, "Exceptional Match"),
    (60, "Great Match"),
    (40, "Good Match"),
    (20, "Fair Match"),
    (0, "Basic Match"),
]


def match_label(score: float) -> str:
    for lower, label in MATCH_LABELS:
        if score >= lower:
            return label
    return MATCH_LABELS[-1][1]


def rank(items: Sequence[T], secondary_key: Callable[[T], Any] | None = None) -> list[T]:
    """Sort by score descending.

    The sort is stable: equal scores keep their input order unless a
    secondary_key is given, in which case ties are ordered by it ascending.
    """
    if secondary_key is None:
        return sorted(items, key=lambda item: -item.score)
    return sorted(items, key=lambda item: (-item.score, secondary_key(item)))


def filter_at_or_above(ranked: Sequence[T], min_percent: float | None) -> list[T]:
    """Keep entries with score >= min_percent, preserving order. None keeps all."""
    if min_percent is None:
        return list(ranked)
    return [item for item in ranked if item.score >= min_percent]


def threshold_summary(total: int, meeting: int) -> tuple[int, int, float]:
    """(total, meeting, share meeting as 0.0-1.0)."""
    ratio = meeting / total if total else 0.0
    return total, meeting, round(ratio, 4)
