"""Shared dependencies for API routes."""

from functools import lru_cache

from config import settings
from services.document_store import BaseDocumentStore, InMemoryDocumentStore
from services.gemini_client import get_client
from services.match_evaluator import MatchEvaluator
from services.match_service import MatchService


@lru_cache
def get_document_store() -> BaseDocumentStore:
    if settings.data_file:
        return InMemoryDocumentStore.from_json_file(settings.data_file)
    return InMemoryDocumentStore()


def get_evaluator() -> MatchEvaluator:
    return MatchEvaluator(
        client=get_client(),
        timeout_seconds=settings.llm_timeout_seconds,
        fallback_only=settings.fallback_only,
    )


def get_match_service() -> MatchService:
    return MatchService(
        store=get_document_store(),
        evaluator=get_evaluator(),
        max_concurrency=settings.llm_max_concurrency,
        recommendation_pool_size=settings.recommendation_pool_size,
    )
