"""Keyword extraction and matching between job postings and candidate text.

Uses a skill synonym dictionary, n-gram term extraction and rapidfuzz
similarity so that "K8s", "kubernetes" and "Kubernetess" all count as the
same skill. Everything here is deterministic.
"""

import logging
import re

from rapidfuzz import fuzz

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Words that carry no matching signal in requirement/responsibility lines
# ---------------------------------------------------------------------------
REQUIREMENT_STOPWORDS: frozenset[str] = frozenset({
    "a", "an", "the", "and", "or", "of", "in", "on", "to", "for", "with", "at",
    "by", "from", "as", "is", "are", "be", "been", "being", "that", "this",
    "will", "can", "may", "must", "should", "able", "ability", "have", "has",
    "least", "plus", "etc", "other", "such", "any", "all", "more", "than",
    "year", "years", "experience", "experienced", "knowledge", "understanding",
    "skill", "skills", "strong", "good", "excellent", "basic", "familiarity",
    "familiar", "proficiency", "proficient", "required", "preferred",
    "minimum", "candidate", "role", "position", "work", "working", "team",
    "degree", "related", "field", "using", "use", "including", "within",
})

# ---------------------------------------------------------------------------
# Skill synonym mapping: aliases -> canonical form
# Applied BEFORE matching so "K8s" and "Kubernetes" both resolve to "kubernetes"
# ---------------------------------------------------------------------------
SKILL_SYNONYMS: dict[str, str] = {
    # JavaScript ecosystem
    "js": "javascript", "es6": "javascript",
    "ts": "typescript",
    "react.js": "react", "reactjs": "react",
    "vue.js": "vue", "vuejs": "vue",
    "angular.js": "angular", "angularjs": "angular",
    "node": "node.js", "nodejs": "node.js",
    "next": "next.js", "nextjs": "next.js",
    # Python ecosystem
    "py": "python", "python3": "python",
    "sklearn": "scikit-learn",
    "fast api": "fastapi",
    # Cloud & DevOps
    "k8s": "kubernetes", "kube": "kubernetes",
    "amazon web services": "aws",
    "google cloud": "gcp", "google cloud platform": "gcp",
    "microsoft azure": "azure",
    "cicd": "ci/cd",
    # Databases
    "postgres": "postgresql", "pg": "postgresql",
    "mongo": "mongodb", "mongo db": "mongodb",
    "ms sql": "sql server", "mssql": "sql server",
    # Languages
    "c sharp": "c#", "csharp": "c#",
    "cpp": "c++",
    "golang": "go",
    # Office & design tools
    "ms excel": "excel", "microsoft excel": "excel",
    "ms word": "word", "microsoft word": "word",
    "adobe photoshop": "photoshop", "ps": "photoshop",
    "ui/ux": "ux design", "ux": "ux design", "user experience": "ux design",
    # Methodologies & soft skills
    "rest api": "rest", "restful": "rest", "rest apis": "rest",
    "pm": "project management", "project mgmt": "project management",
    "agile/scrum": "agile",
    "customer support": "customer service",
    "social media marketing": "social media",
    "data entry clerk": "data entry",
    "sign language": "sign language",
}

# Fuzzy match threshold (0-100). 90+ catches one-letter typos ("Kubernetess")
# but not different words of the same shape ("reach" vs "react").
FUZZY_THRESHOLD = 90
# Shortest term worth fuzzy matching, and the largest length gap allowed
FUZZY_MIN_LENGTH = 5
FUZZY_MAX_LENGTH_GAP = 2


def _normalize(text: str) -> str:
    """Lowercase and strip punctuation, keeping tech-term characters (. # + /)."""
    # Strip sentence-ending periods but keep dots in tech terms like "node.js"
    text = re.sub(r"\.(\s|$)", " ", (text or "").lower())
    return re.sub(r"[^a-z0-9.#+/ -]", " ", text)


def _canonicalize(term: str) -> str:
    """Resolve a term to its canonical form via synonym dictionary."""
    lower = term.lower().strip()
    return SKILL_SYNONYMS.get(lower, lower)


def _canonicalize_set(terms: set[str]) -> set[str]:
    return {_canonicalize(t) for t in terms}


def _extract_terms(text: str) -> set[str]:
    """Extract 1-, 2- and 3-word terms from text."""
    word_list = _normalize(text).split()
    words: set[str] = set(word_list)
    for i in range(len(word_list) - 1):
        words.add(f"{word_list[i]} {word_list[i+1]}")
    for i in range(len(word_list) - 2):
        words.add(f"{word_list[i]} {word_list[i+1]} {word_list[i+2]}")
    return words


def extract_requirement_keywords(lines: list[str]) -> list[str]:
    """Content words from requirement/responsibility lines, sorted and de-duplicated."""
    keywords: set[str] = set()
    for line in lines:
        for word in _normalize(line).split():
            word = word.strip("-/")
            if len(word) > 2 and word not in REQUIREMENT_STOPWORDS and not word.isdigit():
                keywords.add(_canonicalize(word))
    return sorted(keywords)


def _contains_phrase(text_lower: str, phrase: str) -> bool:
    return re.search(rf"(?<![a-z0-9]){re.escape(phrase)}(?![a-z0-9])", text_lower) is not None


def _fuzzy_match(keyword: str, terms: set[str], text_lower: str) -> bool:
    """Check if keyword matches any term using exact, synonym, or fuzzy matching."""
    kw_lower = keyword.lower().strip()
    canon_kw = _canonicalize(kw_lower)

    # 1. Exact match
    if kw_lower in terms or _contains_phrase(text_lower, kw_lower):
        return True

    # 2. Canonical match (synonym resolution)
    if canon_kw in _canonicalize_set(terms) or _contains_phrase(text_lower, canon_kw):
        return True

    # 3. Fuzzy match (Levenshtein ratio) for typos of similar length
    if len(canon_kw) >= FUZZY_MIN_LENGTH:
        for term in terms:
            if len(term) < FUZZY_MIN_LENGTH or abs(len(term) - len(canon_kw)) > FUZZY_MAX_LENGTH_GAP:
                continue
            if fuzz.ratio(canon_kw, term, score_cutoff=FUZZY_THRESHOLD):
                return True

    return False


def match_keywords(
    text: str, keywords: set[str] | list[str]
) -> tuple[list[str], list[str]]:
    """Split keywords into (matched, missing) against free text.

    Order follows the input order for lists and sorted order for sets.
    """
    terms = _extract_terms(text)
    text_lower = _normalize(text)

    ordered = sorted(keywords) if isinstance(keywords, set) else list(dict.fromkeys(keywords))

    matched = []
    missing = []
    for kw in ordered:
        if not kw.strip():
            continue
        if terms and _fuzzy_match(kw, terms, text_lower):
            matched.append(kw)
        else:
            missing.append(kw)

    return matched, missing


def compute_keyword_overlap(matched: list[str], missing: list[str]) -> float:
    """Compute keyword overlap ratio as 0.0-1.0 (0.5 when there is nothing to match)."""
    total = len(matched) + len(missing)
    if total == 0:
        return 0.5
    return len(matched) / total
