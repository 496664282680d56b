"""Prompt templates for match evaluation calls."""

from models.records import CandidateRecord, JobRecord

FORMAT_INSTRUCTIONS = """Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{
  "score": <number 0-100, overall fit of the candidate for this job>,
  "reasons": [<strings, the main reasons behind the score>],
  "strengths": [<strings, the candidate's strengths for this role>],
  "weaknesses": [<strings, gaps or areas to develop>],
  "recommendation": "<string, final hiring recommendation>",
  "detail_scores": {
    "skill_match": <number 0-100>,
    "experience": <number 0-100>,
    "education": <number 0-100>,
    "culture_fit": <number 0-100>
  }
}
All of "score", "reasons", "strengths", "weaknesses" and "recommendation" are required.
"score" must be a JSON number between 0 and 100 inclusive, never a string."""

_PREAMBLE = """You are an AI Applicant Tracking System built to evaluate candidates with disabilities fairly.

Assess the candidate against the job below. Focus on skills, experience and potential,
and apply inclusive evaluation principles: a disability is never a weakness in itself.

SCORING RUBRIC:
- 0-20:  No relevant match.
- 20-40: Weak match, major gaps in core requirements.
- 40-60: Moderate match, meets some key requirements.
- 60-80: Strong match, minor gaps.
- 80-100: Exceptional match."""


def format_instructions() -> str:
    """Machine-readable description of the result shape the service must return."""
    return FORMAT_INSTRUCTIONS


def _join(items: list[str] | None) -> str:
    return ", ".join(items or [])


def _job_section(job: JobRecord) -> str:
    return f"""JOB DETAILS:
Title: {job.title}
Description: {job.description}
Requirements: {_join(job.requirements)}
Responsibilities: {_join(job.responsibilities)}
Required skills: {_join(job.skills_required)}
Accepted accessibility categories: {_join(job.accepted_categories)}"""


def build_applicant_prompt(job: JobRecord, candidate: CandidateRecord) -> str:
    """Prompt for scoring a stored candidate profile against a job."""
    return f"""{_PREAMBLE}

{_job_section(job)}

CANDIDATE:
Name: {candidate.display_name or ""}
Accessibility category: {candidate.accessibility_category or ""}
Field of expertise: {candidate.skill_category or ""}
Resume:
---
{candidate.resume or ""}
---"""


def build_resume_prompt(job: JobRecord, resume_text: str) -> str:
    """Prompt for scoring raw CV text against a job."""
    return f"""{_PREAMBLE}

{_job_section(job)}

CV CONTENT:
---
{resume_text}
---"""


def build_prompt(job: JobRecord, subject: CandidateRecord | str) -> str:
    if isinstance(subject, str):
        return build_resume_prompt(job, subject)
    return build_applicant_prompt(job, subject)
