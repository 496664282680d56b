"""People-compatibility matcher: user-to-user affinity without any AI call.

    score = round(W_INTERESTS    * shared_interest_ratio
                  + W_ACTIVITY   * activity_signal
                  + W_GOAL       * goal_similarity
                  + W_COMPLETE   * profile_completeness)

Every component is clamped to 0.0-1.0 before weighting. The shared-interest
ratio is taken over the requesting user's own interests, so the score for
A looking at B generally differs from B looking at A.
"""

import logging

from config import PeopleMatchWeights, settings
from models.records import UserProfile
from models.responses import CompatibilityResult
from services.ranking import match_label, rank
from services.similarity import word_jaccard

logger = logging.getLogger(__name__)


def _clamp(value: float) -> float:
    return min(1.0, max(0.0, value))


def shared_interests(me: UserProfile, other: UserProfile) -> list[str]:
    """Tags on ``other`` that ``me`` also has, in ``other``'s order."""
    mine = set(me.interests)
    return list(dict.fromkeys(i for i in other.interests if i in mine))


def profile_completeness(profile: UserProfile, weights: PeopleMatchWeights) -> float:
    score = 0.0
    if profile.display_name.strip():
        score += weights.credit_name
    if len(profile.bio) > weights.min_bio_length:
        score += weights.credit_bio
    if profile.goal.strip():
        score += weights.credit_goal
    if profile.interests:
        score += weights.credit_interests
    if profile.profile_image.strip():
        score += weights.credit_image
    return _clamp(score)


def score_pair(
    me: UserProfile,
    other: UserProfile,
    weights: PeopleMatchWeights | None = None,
) -> CompatibilityResult:
    w = weights or settings.people_weights
    shared = shared_interests(me, other)

    interest_ratio = _clamp(len(shared) / max(len(set(me.interests)), 1))
    activity = _clamp(other.activity_count / max(w.activity_saturation, 1))
    goal_similarity = _clamp(word_jaccard(me.goal, other.goal))
    completeness = profile_completeness(other, w)

    raw = (
        w.interests * interest_ratio
        + w.activity * activity
        + w.goal * goal_similarity
        + w.completeness * completeness
    )
    score = min(100, max(0, round(raw)))

    return CompatibilityResult(
        user_id=me.id,
        other_id=other.id,
        score=score,
        label=match_label(score),
        shared_interests=shared,
    )


def score_all(
    me: UserProfile,
    others: list[UserProfile],
    weights: PeopleMatchWeights | None = None,
) -> list[CompatibilityResult]:
    """Score every other profile against ``me`` and rank, excluding ``me``."""
    candidates = [o for o in others if o.id != me.id]
    results = [score_pair(me, o, weights) for o in candidates]
    logger.debug("Scored %d people matches for user %s", len(results), me.id)
    return rank(results)


def matches_query(profile: UserProfile, query: str) -> bool:
    """Case-insensitive substring search over name, bio, goal and interests."""
    q = query.strip().lower()
    if not q:
        return True
    return (
        q in profile.display_name.lower()
        or q in profile.bio.lower()
        or q in profile.goal.lower()
        or any(q in interest.lower() for interest in profile.interests)
    )
