import os

from pydantic import BaseModel
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class FallbackWeights(BaseModel):
    """Component weights for the offline heuristic scorer (sum to 1.0)."""
    skill: float = 0.60
    keyword: float = 0.25
    accessibility: float = 0.15


class PeopleMatchWeights(BaseModel):
    """Weights and credits for user-to-user compatibility (weights sum to 100)."""
    interests: float = 50
    activity: float = 20
    goal: float = 15
    completeness: float = 15

    # activity count at which the activity signal saturates
    activity_saturation: int = 10

    # profile completeness credits (sum to 1.0)
    credit_name: float = 0.2
    credit_bio: float = 0.3
    credit_goal: float = 0.2
    credit_interests: float = 0.2
    credit_image: float = 0.1
    min_bio_length: int = 20


class Settings(BaseSettings):
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    llm_temperature: float = 0.0
    llm_max_output_tokens: int = 2048
    llm_timeout_seconds: float = 20.0
    llm_max_concurrency: int = 5

    environment: str = "development"  # "development" | "production"
    recommendation_pool_size: int = 20  # Active jobs considered for recommendations
    data_file: str = ""  # JSON seed for the in-memory document store
    rate_limit: str = "30/minute"

    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False

    fallback_weights: FallbackWeights = FallbackWeights()
    people_weights: PeopleMatchWeights = PeopleMatchWeights()

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",
        "protected_namespaces": ("settings_",),
    }

    @property
    def fallback_only(self) -> bool:
        """True when no AI call should be attempted at all."""
        return not self.gemini_api_key or self.environment != "production"


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
