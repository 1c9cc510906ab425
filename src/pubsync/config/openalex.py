"""OpenAlex (index) configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var
from .http_resilience import RateLimit, ResilienceConfig
from .storage import get_http_cache_config

OPENALEX_BASE_URL = "https://api.openalex.org"
DEFAULT_OPENALEX_AUTHOR_ID = "a5021047469"
# OpenAlex's maximum page size; only the first page is ever requested
OPENALEX_PER_PAGE = 200


@dataclass(frozen=True, slots=True)
class OpenAlexConfig:
    """OpenAlex author lookup settings. ``api_key`` is optional; without it the source is skipped."""

    author_id: str
    api_key: str | None
    resilience: ResilienceConfig
    per_page: int = OPENALEX_PER_PAGE

    @property
    def enabled(self) -> bool:
        return self.api_key is not None


def get_openalex_config(*, resilience: ResilienceConfig | None = None) -> OpenAlexConfig:
    return OpenAlexConfig(
        author_id=optional_env_var("OPENALEX_AUTHOR_ID", DEFAULT_OPENALEX_AUTHOR_ID)
        or DEFAULT_OPENALEX_AUTHOR_ID,
        api_key=optional_env_var("OPENALEX_API_KEY"),
        resilience=resilience
        or ResilienceConfig(
            name="openalex",
            base_url=OPENALEX_BASE_URL,
            ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
            cache=get_http_cache_config("openalex"),
            default_headers={"Accept": "application/json"},
        ),
    )
