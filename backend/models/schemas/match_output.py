"""Shape the text-generation service must return for a match evaluation."""

from typing import Annotated

from pydantic import AliasChoices, BaseModel, Field

# strict: "72" or true are rejected rather than coerced
Percent = Annotated[float, Field(ge=0, le=100, strict=True, allow_inf_nan=False)]


class DetailScores(BaseModel):
    """Optional per-category sub-scores (0-100)."""
    skill_match: Percent | None = Field(
        default=None, validation_alias=AliasChoices("skill_match", "skillMatchScore")
    )
    experience: Percent | None = Field(
        default=None, validation_alias=AliasChoices("experience", "experienceScore")
    )
    education: Percent | None = Field(
        default=None, validation_alias=AliasChoices("education", "educationScore")
    )
    culture_fit: Percent | None = Field(
        default=None, validation_alias=AliasChoices("culture_fit", "cultureFitScore")
    )


class MatchOutput(BaseModel):
    """Validated text-generation result.

    ``matchPercentage`` is accepted in place of ``score`` for payloads
    produced with the older prompt wording.
    """
    score: Percent = Field(validation_alias=AliasChoices("score", "matchPercentage"))
    reasons: list[str]
    strengths: list[str]
    weaknesses: list[str]
    recommendation: str
    detail_scores: DetailScores | None = Field(
        default=None, validation_alias=AliasChoices("detail_scores", "detailScores")
    )
