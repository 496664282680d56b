"""Text similarity measures used by the heuristic scorers."""

import logging
import re

from sklearn.feature_extraction.text import TfidfVectorizer
from sklearn.metrics.pairwise import cosine_similarity as sklearn_cosine

logger = logging.getLogger(__name__)

_WORD_SPLIT = re.compile(r"\W+")


def tfidf_cosine_similarity(text_a: str, text_b: str) -> float:
    """Compute cosine similarity between two texts using TF-IDF vectors."""
    if not text_a.strip() or not text_b.strip():
        return 0.0

    vectorizer = TfidfVectorizer(
        stop_words="english",
        max_features=5000,
        sublinear_tf=True,
        ngram_range=(1, 2),
    )
    try:
        tfidf_matrix = vectorizer.fit_transform([text_a, text_b])
        score = sklearn_cosine(tfidf_matrix[0:1], tfidf_matrix[1:2])[0][0]
        return min(1.0, max(0.0, float(score)))
    except ValueError:
        # empty vocabulary: both texts were stopwords only
        return 0.0


def _word_set(text: str) -> set[str]:
    return {w for w in _WORD_SPLIT.split(text.lower()) if w}


def word_jaccard(text_a: str, text_b: str) -> float:
    """|shared words| / |all words|, 0.0 when either text has no words."""
    words_a = _word_set(text_a or "")
    words_b = _word_set(text_b or "")
    if not words_a or not words_b:
        return 0.0
    return len(words_a & words_b) / len(words_a | words_b)
