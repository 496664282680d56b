"""Read-only access to jobs, candidates, applications and user profiles.

The scoring core never writes to the store. ``InMemoryDocumentStore`` backs
development and tests; a production deployment plugs a real document
database in behind ``BaseDocumentStore``.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from models.records import CandidateRecord, JobRecord, UserProfile
from services.errors import RecordNotFound

logger = logging.getLogger(__name__)


class BaseDocumentStore(ABC):
    @abstractmethod
    def get_job(self, job_id: str) -> JobRecord:
        """Raises RecordNotFound for unknown ids."""

    @abstractmethod
    def get_candidate(self, candidate_id: str) -> CandidateRecord:
        """Raises RecordNotFound for unknown ids."""

    @abstractmethod
    def list_applicants(self, job_id: str) -> list[CandidateRecord]:
        """Candidates that applied to a job, in application order."""

    @abstractmethod
    def list_jobs(self) -> list[JobRecord]:
        """All job postings, in store order."""

    @abstractmethod
    def get_user_profile(self, user_id: str) -> UserProfile:
        """Raises RecordNotFound for unknown ids."""

    @abstractmethod
    def list_user_profiles(self) -> list[UserProfile]:
        """All user profiles."""


class InMemoryDocumentStore(BaseDocumentStore):
    def __init__(
        self,
        jobs: list[JobRecord] | None = None,
        candidates: list[CandidateRecord] | None = None,
        applications: list[tuple[str, str]] | None = None,  # (job_id, candidate_id)
        users: list[UserProfile] | None = None,
    ) -> None:
        self._jobs = {j.id: j for j in jobs or []}
        self._candidates = {c.id: c for c in candidates or []}
        self._applications = list(applications or [])
        self._users = {u.id: u for u in users or []}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "InMemoryDocumentStore":
        return cls(
            jobs=[JobRecord.model_validate(j) for j in data.get("jobs", [])],
            candidates=[CandidateRecord.model_validate(c) for c in data.get("candidates", [])],
            applications=[(a["job_id"], a["candidate_id"]) for a in data.get("applications", [])],
            users=[UserProfile.model_validate(u) for u in data.get("users", [])],
        )

    @classmethod
    def from_json_file(cls, path: str | Path) -> "InMemoryDocumentStore":
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        store = cls.from_dict(data)
        logger.info(
            "Loaded document store from %s: %d jobs, %d candidates, %d users",
            path, len(store._jobs), len(store._candidates), len(store._users),
        )
        return store

    def get_job(self, job_id: str) -> JobRecord:
        try:
            return self._jobs[job_id]
        except KeyError:
            raise RecordNotFound("job", job_id) from None

    def get_candidate(self, candidate_id: str) -> CandidateRecord:
        try:
            return self._candidates[candidate_id]
        except KeyError:
            raise RecordNotFound("candidate", candidate_id) from None

    def list_applicants(self, job_id: str) -> list[CandidateRecord]:
        self.get_job(job_id)
        # an application whose candidate record is gone still counts,
        # as an empty record
        return [
            self._candidates.get(candidate_id, CandidateRecord(id=candidate_id))
            for app_job_id, candidate_id in self._applications
            if app_job_id == job_id
        ]

    def list_jobs(self) -> list[JobRecord]:
        return list(self._jobs.values())

    def get_user_profile(self, user_id: str) -> UserProfile:
        try:
            return self._users[user_id]
        except KeyError:
            raise RecordNotFound("user", user_id) from None

    def list_user_profiles(self) -> list[UserProfile]:
        return list(self._users.values())
