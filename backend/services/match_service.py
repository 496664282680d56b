"""Caller-facing entry points used by the web layer (or a CLI or batch job)."""

import logging

from models.records import CandidateRecord, JobStatus
from models.responses import (
    FallbackMatch,
    JobRecommendations,
    RankedCompatibility,
    RankedMatches,
    ScoredMatch,
)
from services import people_matcher
from services.batch_orchestrator import BatchOrchestrator
from services.document_store import BaseDocumentStore
from services.errors import ErrorKind
from services.fallback_scorer import insufficient_data_result
from services.match_evaluator import MatchEvaluator
from services.ranking import filter_at_or_above, rank, threshold_summary

logger = logging.getLogger(__name__)


class MatchService:
    def __init__(
        self,
        store: BaseDocumentStore,
        evaluator: MatchEvaluator,
        max_concurrency: int = 5,
        recommendation_pool_size: int = 20,
    ) -> None:
        self.store = store
        self.evaluator = evaluator
        self.recommendation_pool_size = recommendation_pool_size
        self.orchestrator = BatchOrchestrator(evaluator, max_concurrency=max_concurrency)

    async def score_applicants_for_job(
        self, job_id: str, min_percent: int | None = None
    ) -> RankedMatches:
        """Score every applicant of a job, rank, then apply the threshold.

        Ties keep application order.
        """
        job = self.store.get_job(job_id)
        applicants: list[CandidateRecord] = self.store.list_applicants(job_id)

        outcomes = await self.orchestrator.evaluate_all(job, applicants)
        ranked = rank(outcomes)
        kept = filter_at_or_above(ranked, min_percent)
        total, meeting, ratio = threshold_summary(len(ranked), len(kept))

        return RankedMatches(
            job_id=job_id,
            results=kept,
            min_percent=min_percent,
            total=total,
            meeting=meeting,
            meeting_ratio=ratio,
        )

    async def score_resume_for_job(
        self, resume_text: str, job_id: str
    ) -> ScoredMatch | FallbackMatch:
        job = self.store.get_job(job_id)
        if not resume_text.strip():
            return FallbackMatch(
                result=insufficient_data_result(job.id, None),
                reason=ErrorKind.INSUFFICIENT_DATA,
            )
        if not self.evaluator.available:
            logger.warning("AI service unavailable, using heuristic CV scoring for job %s", job_id)
        return await self.evaluator.evaluate(job, resume_text)

    def score_people_matches(
        self,
        user_id: str,
        query: str | None = None,
        min_score: int | None = None,
    ) -> RankedCompatibility:
        me = self.store.get_user_profile(user_id)
        others = self.store.list_user_profiles()

        ranked = people_matcher.score_all(me, others)
        if query:
            by_id = {o.id: o for o in others}
            ranked = [r for r in ranked if people_matcher.matches_query(by_id[r.other_id], query)]
        ranked = filter_at_or_above(ranked, min_score)

        return RankedCompatibility(user_id=user_id, results=ranked)

    async def recommend_jobs_for_candidate(
        self, candidate_id: str, limit: int = 5
    ) -> JobRecommendations:
        """Best-fitting Active jobs for one candidate, highest score first."""
        candidate = self.store.get_candidate(candidate_id)
        active = [j for j in self.store.list_jobs() if j.status == JobStatus.ACTIVE]
        pool = active[: self.recommendation_pool_size]
        logger.debug(
            "Recommending from %d of %d active jobs for candidate %s",
            len(pool), len(active), candidate_id,
        )

        outcomes = await self.orchestrator.evaluate_jobs(candidate, pool)
        ranked = rank(outcomes)

        return JobRecommendations(candidate_id=candidate_id, results=ranked[:limit])
