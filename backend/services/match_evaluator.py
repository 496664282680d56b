"""AI match evaluator: one text-generation call per item, heuristic on failure.

evaluate() never raises for an item-level problem. Every outcome is either a
ScoredMatch (validated AI output) or a FallbackMatch carrying the ErrorKind
that caused the heuristic to be used.
"""

import asyncio
import logging

import httpx

from models.records import CandidateRecord, JobRecord
from models.responses import FallbackMatch, MatchResult, ScoredMatch
from services import prompt_builder
from services.errors import (
    ErrorKind,
    ExternalServiceUnavailable,
    SchemaMismatch,
)
from services.fallback_scorer import score_fallback
from services.gemini_client import BaseTextClient
from services.ranking import match_label
from services.schema_validator import parse_match_output

logger = logging.getLogger(__name__)


def _subject_id(subject: CandidateRecord | str) -> str:
    return "<resume>" if isinstance(subject, str) else subject.id


class MatchEvaluator:
    """Scores one (job, candidate) or (job, CV text) pair.

    With ``client=None`` or ``fallback_only=True`` no network call is made.
    """

    def __init__(
        self,
        client: BaseTextClient | None,
        timeout_seconds: float = 20.0,
        fallback_only: bool = False,
    ) -> None:
        self.client = client
        self.timeout_seconds = timeout_seconds
        self.fallback_only = fallback_only

    @property
    def available(self) -> bool:
        return self.client is not None and not self.fallback_only

    def fallback(
        self, job: JobRecord, subject: CandidateRecord | str, reason: ErrorKind
    ) -> FallbackMatch:
        return FallbackMatch(result=score_fallback(job, subject), reason=reason)

    async def evaluate(
        self, job: JobRecord, subject: CandidateRecord | str
    ) -> ScoredMatch | FallbackMatch:
        if not self.available:
            return self.fallback(job, subject, ErrorKind.SERVICE_UNAVAILABLE)

        raw, failure = await self._complete(job, subject)
        if failure is not None:
            return self.fallback(job, subject, failure)

        try:
            output = parse_match_output(raw)
        except SchemaMismatch as e:
            logger.warning("Schema mismatch for job=%s candidate=%s: %s", job.id, _subject_id(subject), e)
            return self.fallback(job, subject, ErrorKind.SCHEMA_MISMATCH)

        score = min(100, max(0, round(output.score)))
        return ScoredMatch(
            result=MatchResult(
                job_id=job.id,
                candidate_id=None if isinstance(subject, str) else subject.id,
                score=score,
                label=match_label(score),
                reasons=output.reasons,
                strengths=output.strengths,
                weaknesses=output.weaknesses,
                recommendation=output.recommendation,
                detail_scores=output.detail_scores,
            )
        )

    async def _complete(
        self, job: JobRecord, subject: CandidateRecord | str
    ) -> tuple[str, ErrorKind | None]:
        """Run the external call. Returns (raw text, None) or ("", failure kind)."""
        prompt = prompt_builder.build_prompt(job, subject)
        subject_id = _subject_id(subject)
        logger.debug("Requesting AI evaluation job=%s candidate=%s", job.id, subject_id)
        try:
            raw = await asyncio.wait_for(
                self.client.complete(prompt, prompt_builder.format_instructions()),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.error(
                "AI evaluation timed out after %.1fs job=%s candidate=%s",
                self.timeout_seconds, job.id, subject_id,
            )
            return "", ErrorKind.UPSTREAM_TIMEOUT
        except (ExternalServiceUnavailable, httpx.NetworkError, ConnectionError) as e:
            logger.debug("AI service unavailable job=%s candidate=%s: %s", job.id, subject_id, e)
            return "", ErrorKind.SERVICE_UNAVAILABLE
        except Exception as e:
            logger.error("AI evaluation failed job=%s candidate=%s: %s", job.id, subject_id, e)
            return "", ErrorKind.UPSTREAM_ERROR
        return raw, None
