"""Batch orchestrator: fan scoring pairs out to the evaluator.

Flow:
    (job, candidate) pairs
      ├─ no profile data          → FallbackMatch(insufficient_data), no call
      ├─ service found down       → FallbackMatch(service_unavailable), no call
      └─ evaluator.evaluate(...)  → ScoredMatch | FallbackMatch
                                    (at most max_concurrency calls in flight)

The output has exactly one entry per input pair, in input order.
"""

import asyncio
import logging
from collections import Counter

from models.records import CandidateRecord, JobRecord
from models.responses import FallbackMatch, ScoredMatch
from services.errors import ErrorKind
from services.fallback_scorer import insufficient_data_result
from services.match_evaluator import MatchEvaluator

logger = logging.getLogger(__name__)


class BatchOrchestrator:
    def __init__(self, evaluator: MatchEvaluator, max_concurrency: int = 5) -> None:
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self.evaluator = evaluator
        self.max_concurrency = max_concurrency

    async def evaluate_all(
        self, job: JobRecord, candidates: list[CandidateRecord]
    ) -> list[ScoredMatch | FallbackMatch]:
        """Score every candidate against one job."""
        return await self._run([(job, c) for c in candidates], f"job {job.id}")

    async def evaluate_jobs(
        self, candidate: CandidateRecord, jobs: list[JobRecord]
    ) -> list[ScoredMatch | FallbackMatch]:
        """Score one candidate against every job."""
        return await self._run([(j, candidate) for j in jobs], f"candidate {candidate.id}")

    async def _run(
        self, pairs: list[tuple[JobRecord, CandidateRecord]], batch: str
    ) -> list[ScoredMatch | FallbackMatch]:
        if not pairs:
            return []

        if not self.evaluator.available:
            logger.warning(
                "AI service unavailable, using heuristic scoring for %d pairs of %s",
                len(pairs), batch,
            )

        semaphore = asyncio.Semaphore(self.max_concurrency)
        # set once the service reports itself unavailable; later pairs skip the call
        service_down = False

        async def _one(job: JobRecord, candidate: CandidateRecord) -> ScoredMatch | FallbackMatch:
            nonlocal service_down
            if not candidate.has_profile_data:
                return FallbackMatch(
                    result=insufficient_data_result(job.id, candidate.id),
                    reason=ErrorKind.INSUFFICIENT_DATA,
                )
            async with semaphore:
                if service_down:
                    return self.evaluator.fallback(job, candidate, ErrorKind.SERVICE_UNAVAILABLE)
                outcome = await self.evaluator.evaluate(job, candidate)
                if isinstance(outcome, FallbackMatch) and outcome.reason == ErrorKind.SERVICE_UNAVAILABLE:
                    service_down = True
                return outcome

        # gather keeps input order regardless of completion order
        outcomes = await asyncio.gather(*(_one(j, c) for j, c in pairs))

        self._log_summary(batch, list(outcomes))
        return list(outcomes)

    def _log_summary(self, batch: str, outcomes: list[ScoredMatch | FallbackMatch]) -> None:
        reasons = Counter(o.reason.value for o in outcomes if isinstance(o, FallbackMatch))
        scored = len(outcomes) - sum(reasons.values())
        if self.evaluator.available and reasons.get(ErrorKind.SERVICE_UNAVAILABLE.value):
            logger.warning(
                "AI service became unavailable during batch for %s (%d pairs fell back)",
                batch, reasons[ErrorKind.SERVICE_UNAVAILABLE.value],
            )
        logger.info(
            "Scored %d pairs for %s: %d by AI, fallbacks %s",
            len(outcomes), batch, scored, dict(reasons) or "none",
        )
