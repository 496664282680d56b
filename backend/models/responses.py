from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from models.schemas.match_output import DetailScores
from services.errors import ErrorKind


class MatchResult(BaseModel):
    job_id: str
    candidate_id: str | None = None  # None for free-text resume scoring
    score: int = 0  # 0-100
    label: str = ""
    reasons: list[str] = []
    strengths: list[str] = []
    weaknesses: list[str] = []
    recommendation: str = ""
    detail_scores: DetailScores | None = None


class ScoredMatch(BaseModel):
    """Result produced by the text-generation service."""
    kind: Literal["scored"] = "scored"
    result: MatchResult

    @property
    def score(self) -> int:
        return self.result.score


class FallbackMatch(BaseModel):
    """Result produced by the offline heuristic, with the reason it was used."""
    kind: Literal["fallback"] = "fallback"
    result: MatchResult
    reason: ErrorKind

    @property
    def score(self) -> int:
        return self.result.score


MatchOutcome = Annotated[Union[ScoredMatch, FallbackMatch], Field(discriminator="kind")]


class RankedMatches(BaseModel):
    job_id: str
    results: list[MatchOutcome] = []
    min_percent: int | None = None
    total: int = 0  # evaluated, before the threshold
    meeting: int = 0  # at or above the threshold
    meeting_ratio: float = 0.0  # 0.0-1.0


class JobRecommendations(BaseModel):
    candidate_id: str
    results: list[MatchOutcome] = []


class CompatibilityResult(BaseModel):
    user_id: str
    other_id: str
    score: int = 0  # 0-100
    label: str = ""
    shared_interests: list[str] = []


class RankedCompatibility(BaseModel):
    user_id: str
    results: list[CompatibilityResult] = []


class HealthResponse(BaseModel):
    status: str = "ok"
    gemini_configured: bool = False
    fallback_only: bool = True
