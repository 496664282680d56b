"""Structured-output contracts for the text-generation service."""

from models.schemas.match_output import DetailScores, MatchOutput

__all__ = [
    "DetailScores",
    "MatchOutput",
]
