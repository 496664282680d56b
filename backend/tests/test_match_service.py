"""Tests for the caller-facing entry points over an in-memory store."""

import json

import pytest

from fakes import FakeTextClient, ai_payload
from models.records import JobRecord, JobStatus
from models.responses import FallbackMatch, ScoredMatch
from services.document_store import InMemoryDocumentStore
from services.errors import ErrorKind, RecordNotFound
from services.match_evaluator import MatchEvaluator
from services.match_service import MatchService


@pytest.fixture
def store(frontend_job, react_candidate, no_skill_candidate, users):
    return InMemoryDocumentStore(
        jobs=[frontend_job],
        candidates=[react_candidate, no_skill_candidate],
        applications=[
            ("job-1", "cand-b"),
            ("job-1", "cand-a"),
            ("job-1", "cand-gone"),
            ("job-2", "cand-a"),
        ],
        users=users,
    )


@pytest.fixture
def offline_service(store):
    return MatchService(store, MatchEvaluator(None))


class TestApplicantScoring:
    @pytest.mark.asyncio
    async def test_ranks_all_applicants(self, offline_service):
        ranked = await offline_service.score_applicants_for_job("job-1")

        assert ranked.total == 3
        assert [o.result.candidate_id for o in ranked.results] == ["cand-a", "cand-b", "cand-gone"]
        assert ranked.results[-1].reason == ErrorKind.INSUFFICIENT_DATA
        assert ranked.results[-1].score == 0

    @pytest.mark.asyncio
    async def test_threshold(self, offline_service):
        ranked = await offline_service.score_applicants_for_job("job-1", min_percent=40)

        assert [o.result.candidate_id for o in ranked.results] == ["cand-a"]
        assert ranked.min_percent == 40
        assert ranked.total == 3
        assert ranked.meeting == 1
        assert ranked.meeting_ratio == pytest.approx(0.3333)

    @pytest.mark.asyncio
    async def test_mixed_ai_and_fallback(self, store):
        client = FakeTextClient(
            responses={"Ayu Lestari": ai_payload(72), "Budi Santoso": ai_payload(250)}
        )
        service = MatchService(store, MatchEvaluator(client))

        ranked = await service.score_applicants_for_job("job-1")

        a, b, gone = ranked.results
        assert isinstance(a, ScoredMatch) and a.score == 72
        assert isinstance(b, FallbackMatch) and b.reason == ErrorKind.SCHEMA_MISMATCH
        assert gone.reason == ErrorKind.INSUFFICIENT_DATA
        assert len(client.calls) == 2

    @pytest.mark.asyncio
    async def test_unknown_job(self, offline_service):
        with pytest.raises(RecordNotFound):
            await offline_service.score_applicants_for_job("nope")

    @pytest.mark.asyncio
    async def test_job_without_applicants(self, frontend_job):
        store = InMemoryDocumentStore(jobs=[frontend_job])
        ranked = await MatchService(store, MatchEvaluator(None)).score_applicants_for_job("job-1")
        assert ranked.results == []
        assert ranked.meeting_ratio == 0.0


class TestResumeScoring:
    @pytest.mark.asyncio
    async def test_scores_cv_text(self, store):
        client = FakeTextClient(default=ai_payload(88))
        outcome = await MatchService(store, MatchEvaluator(client)).score_resume_for_job(
            "Frontend developer, React and TypeScript", "job-1"
        )
        assert isinstance(outcome, ScoredMatch)
        assert outcome.score == 88

    @pytest.mark.asyncio
    async def test_blank_cv_is_insufficient(self, store):
        client = FakeTextClient()
        outcome = await MatchService(store, MatchEvaluator(client)).score_resume_for_job("  \n", "job-1")
        assert outcome.reason == ErrorKind.INSUFFICIENT_DATA
        assert outcome.score == 0
        assert client.calls == []

    @pytest.mark.asyncio
    async def test_offline_cv_is_deterministic(self, offline_service):
        cv = "React developer who builds accessible interfaces"
        first = await offline_service.score_resume_for_job(cv, "job-1")
        second = await offline_service.score_resume_for_job(cv, "job-1")
        assert first == second


class TestPeopleMatches:
    def test_excludes_self_and_ranks(self, offline_service):
        ranked = offline_service.score_people_matches("u1")
        assert ranked.user_id == "u1"
        assert [r.other_id for r in ranked.results] == ["u2", "u3"]

    def test_query_filter(self, offline_service):
        ranked = offline_service.score_people_matches("u1", query="football")
        assert [r.other_id for r in ranked.results] == ["u3"]

    def test_min_score(self, offline_service):
        ranked = offline_service.score_people_matches("u1", min_score=50)
        assert [r.other_id for r in ranked.results] == ["u2"]

    def test_unknown_user(self, offline_service):
        with pytest.raises(RecordNotFound):
            offline_service.score_people_matches("ghost")


def test_store_from_json_file(tmp_path):
    path = tmp_path / "store.json"
    path.write_text(json.dumps({
        "jobs": [{"id": "j1", "title": "Clerk", "skills_required": ["Excel"], "status": "Draft"}],
        "candidates": [{"id": "c1", "display_name": "Dewi"}],
        "applications": [{"job_id": "j1", "candidate_id": "c1"}],
        "users": [{"id": "u1", "interests": ["art"]}],
    }))

    store = InMemoryDocumentStore.from_json_file(path)

    assert store.get_job("j1").status.value == "Draft"
    assert [c.id for c in store.list_applicants("j1")] == ["c1"]
    assert store.get_user_profile("u1").interests == ["art"]
    with pytest.raises(RecordNotFound):
        store.get_candidate("c2")


@pytest.fixture
def job_board(frontend_job, react_candidate, empty_candidate):
    jobs = [
        JobRecord(id="job-closed", title="Senior React Engineer", skills_required=["React"],
                  status=JobStatus.CLOSED),
        JobRecord(id="job-clerk", title="Data Entry Clerk", skills_required=["Excel"]),
        frontend_job,
        JobRecord(id="job-draft", title="React Intern", skills_required=["React"], status=JobStatus.DRAFT),
    ]
    return InMemoryDocumentStore(jobs=jobs, candidates=[react_candidate, empty_candidate])


class TestJobRecommendations:
    @pytest.mark.asyncio
    async def test_only_active_jobs_ranked(self, job_board):
        service = MatchService(job_board, MatchEvaluator(None))

        recs = await service.recommend_jobs_for_candidate("cand-a")

        assert recs.candidate_id == "cand-a"
        assert [o.result.job_id for o in recs.results] == ["job-1", "job-clerk"]
        assert all(o.result.candidate_id == "cand-a" for o in recs.results)

    @pytest.mark.asyncio
    async def test_limit(self, job_board):
        recs = await MatchService(job_board, MatchEvaluator(None)).recommend_jobs_for_candidate(
            "cand-a", limit=1
        )
        assert [o.result.job_id for o in recs.results] == ["job-1"]

    @pytest.mark.asyncio
    async def test_pool_size_caps_jobs_considered(self, job_board):
        service = MatchService(job_board, MatchEvaluator(None), recommendation_pool_size=1)
        recs = await service.recommend_jobs_for_candidate("cand-a")
        assert [o.result.job_id for o in recs.results] == ["job-clerk"]

    @pytest.mark.asyncio
    async def test_ai_scores_order_results(self, job_board):
        client = FakeTextClient(responses={"Data Entry Clerk": ai_payload(90)}, default=ai_payload(40))
        recs = await MatchService(job_board, MatchEvaluator(client)).recommend_jobs_for_candidate("cand-a")

        assert [o.result.job_id for o in recs.results] == ["job-clerk", "job-1"]
        assert len(client.calls) == 2
        assert not any("Senior React Engineer" in p for p in client.calls)

    @pytest.mark.asyncio
    async def test_empty_profile(self, job_board):
        recs = await MatchService(job_board, MatchEvaluator(None)).recommend_jobs_for_candidate(
            "cand-empty"
        )
        assert {o.reason for o in recs.results} == {ErrorKind.INSUFFICIENT_DATA}

    @pytest.mark.asyncio
    async def test_unknown_candidate(self, job_board):
        with pytest.raises(RecordNotFound):
            await MatchService(job_board, MatchEvaluator(None)).recommend_jobs_for_candidate("nobody")
