"""Input records read from the document store.

Records are treated as immutable for the duration of a scoring pass.
Every candidate/profile field may be absent; scoring code must cope.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class JobStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    CLOSED = "Closed"
    DRAFT = "Draft"


class JobRecord(BaseModel):
    """A job posting."""
    model_config = ConfigDict(frozen=True)

    id: str
    title: str = ""
    description: str = ""
    requirements: list[str] = []
    responsibilities: list[str] = []
    skills_required: list[str] = []
    accepted_categories: list[str] = []  # accessibility categories the employer accepts
    status: JobStatus = JobStatus.ACTIVE


class CandidateRecord(BaseModel):
    """A job seeker as seen by the applicant screen."""
    model_config = ConfigDict(frozen=True)

    id: str
    display_name: str | None = None
    resume: str | None = None  # free text or flattened structured CV
    skill_category: str | None = None  # primary field of expertise
    accessibility_category: str | None = None  # primary disability type

    @property
    def has_profile_data(self) -> bool:
        return any(
            (value or "").strip()
            for value in (
                self.display_name,
                self.resume,
                self.skill_category,
                self.accessibility_category,
            )
        )


class UserProfile(BaseModel):
    """A member of the social layer (journeys, challenges)."""
    model_config = ConfigDict(frozen=True)

    id: str
    display_name: str = ""
    bio: str = ""
    goal: str = ""
    interests: list[str] = []
    profile_image: str = ""
    activity_count: int = 0  # e.g. number of journey entries
