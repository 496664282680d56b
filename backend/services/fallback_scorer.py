"""Offline heuristic match scoring.

Used whenever the text-generation service is not consulted or fails for an
item. The score is a pure function of the job and candidate content:

    score = 100 * (W_SKILL * skill_coverage
                   + W_KEYWORD * keyword_fit
                   + W_ACCESSIBILITY * accessibility_fit)

- skill_coverage: share of the job's required skills found in the candidate
- keyword_fit: mean of requirement keyword coverage and TF-IDF similarity
  between the candidate text and the full posting
- accessibility_fit: 1.0 when the candidate's category is accepted (or the
  job lists none), 0.5 when unknown, 0.0 when not accepted
"""

import logging

from rapidfuzz import fuzz

from config import FallbackWeights, settings
from models.records import CandidateRecord, JobRecord
from models.responses import MatchResult
from models.schemas.match_output import DetailScores
from services.keyword_extractor import (
    FUZZY_THRESHOLD,
    compute_keyword_overlap,
    extract_requirement_keywords,
    match_keywords,
)
from services.ranking import match_label
from services.similarity import tfidf_cosine_similarity

logger = logging.getLogger(__name__)

INSUFFICIENT_DATA_REASON = "Insufficient data to evaluate this candidate"

# Max skills/keywords quoted back in reasons, strengths and weaknesses
_MAX_LISTED = 3


def _candidate_text(subject: CandidateRecord | str) -> str:
    if isinstance(subject, str):
        return subject
    parts = [subject.skill_category, subject.accessibility_category, subject.resume]
    return "\n".join(p for p in parts if p)


def _job_text(job: JobRecord) -> str:
    parts = [job.title, job.description, *job.requirements, *job.responsibilities, *job.skills_required]
    return "\n".join(p for p in parts if p)


def _accessibility_fit(job: JobRecord, subject: CandidateRecord | str) -> tuple[float, str | None]:
    """Return (fit, matched or declared category)."""
    accepted = [c for c in job.accepted_categories if c.strip()]
    if not accepted:
        return 1.0, None

    if isinstance(subject, str):
        found, _ = match_keywords(subject, accepted)
        if found:
            return 1.0, found[0]
        return 0.5, None

    category = (subject.accessibility_category or "").strip()
    if not category:
        return 0.5, None
    for option in accepted:
        if fuzz.ratio(category.lower(), option.lower()) >= FUZZY_THRESHOLD:
            return 1.0, category
    return 0.0, category


def _recommendation(score: int) -> str:
    if score >= 80:
        return "Strong fit for the listed requirements. Recommended for interview."
    if score >= 60:
        return "Good fit. Worth an interview to confirm experience."
    if score >= 40:
        return "Partial fit. Review the missing skills before deciding."
    return "Weak fit for the listed requirements."


def score_fallback(
    job: JobRecord,
    subject: CandidateRecord | str,
    weights: FallbackWeights | None = None,
) -> MatchResult:
    """Deterministic heuristic MatchResult for a candidate record or raw CV text."""
    w = weights or settings.fallback_weights
    text = _candidate_text(subject)
    candidate_id = None if isinstance(subject, str) else subject.id

    matched_skills, missing_skills = match_keywords(text, job.skills_required)
    skill_coverage = compute_keyword_overlap(matched_skills, missing_skills)

    requirement_keywords = extract_requirement_keywords(job.requirements + job.responsibilities)
    matched_kw, missing_kw = match_keywords(text, requirement_keywords)
    keyword_coverage = compute_keyword_overlap(matched_kw, missing_kw)
    text_similarity = tfidf_cosine_similarity(text, _job_text(job))
    keyword_fit = (keyword_coverage + text_similarity) / 2 if text.strip() else 0.0
    if not text.strip():
        skill_coverage = 0.0

    access_fit, category = _accessibility_fit(job, subject)

    raw = w.skill * skill_coverage + w.keyword * keyword_fit + w.accessibility * access_fit
    score = min(100, max(0, round(raw * 100)))

    reasons = [f"Has required skill: {s}" for s in matched_skills[:_MAX_LISTED]]
    if requirement_keywords:
        reasons.append(f"Covers {len(matched_kw)} of {len(requirement_keywords)} requirement keywords")
    if access_fit == 1.0 and category:
        reasons.append(f"Accessibility category '{category}' is accepted for this role")
    reasons.append("Scored by keyword heuristic (AI analysis not used)")

    strengths = [f"Required skill: {s}" for s in matched_skills[:_MAX_LISTED]]
    strengths += [f"Relevant experience: {kw}" for kw in matched_kw[:_MAX_LISTED]]

    weaknesses = [f"Missing required skill: {s}" for s in missing_skills[:_MAX_LISTED]]
    if access_fit == 0.0 and category:
        weaknesses.append(f"Accessibility category '{category}' is not listed for this role")

    logger.debug(
        "Fallback score job=%s candidate=%s score=%d (skill=%.2f keyword=%.2f access=%.2f)",
        job.id, candidate_id, score, skill_coverage, keyword_fit, access_fit,
    )

    return MatchResult(
        job_id=job.id,
        candidate_id=candidate_id,
        score=score,
        label=match_label(score),
        reasons=reasons,
        strengths=strengths,
        weaknesses=weaknesses,
        recommendation=_recommendation(score),
        detail_scores=DetailScores(
            skill_match=round(skill_coverage * 100) if job.skills_required else None
        ),
    )


def insufficient_data_result(job_id: str, candidate_id: str | None) -> MatchResult:
    return MatchResult(
        job_id=job_id,
        candidate_id=candidate_id,
        score=0,
        label=match_label(0),
        reasons=[INSUFFICIENT_DATA_REASON],
        recommendation="No recommendation: the candidate profile is incomplete.",
    )
