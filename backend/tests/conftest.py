"""Shared record fixtures."""

import pytest

from models.records import CandidateRecord, JobRecord, UserProfile


@pytest.fixture
def frontend_job():
    return JobRecord(
        id="job-1",
        title="Frontend Developer",
        description="Build accessible web interfaces for our hiring platform.",
        requirements=["2+ years building web interfaces", "Experience with component libraries"],
        responsibilities=["Develop accessible user interfaces", "Review pull requests"],
        skills_required=["React", "TypeScript"],
        accepted_categories=["Tunadaksa", "Tunarungu"],
    )


@pytest.fixture
def react_candidate():
    return CandidateRecord(
        id="cand-a",
        display_name="Ayu Lestari",
        skill_category="React",
        accessibility_category="Tunadaksa",
    )


@pytest.fixture
def no_skill_candidate():
    return CandidateRecord(
        id="cand-b",
        display_name="Budi Santoso",
        accessibility_category="Tunadaksa",
    )


@pytest.fixture
def empty_candidate():
    return CandidateRecord(id="cand-empty")


@pytest.fixture
def users():
    return [
        UserProfile(
            id="u1",
            display_name="Sari",
            bio="Frontend developer learning accessibility testing every day",
            goal="become a frontend developer",
            interests=["coding", "design", "music"],
            profile_image="https://img.example/u1.png",
            activity_count=4,
        ),
        UserProfile(
            id="u2",
            display_name="Rina",
            bio="Designer who loves music and inclusive products",
            goal="become a product designer",
            interests=["design", "music"],
            activity_count=12,
        ),
        UserProfile(
            id="u3",
            display_name="Tono",
            interests=["football"],
        ),
    ]
