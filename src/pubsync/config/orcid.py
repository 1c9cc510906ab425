"""ORCID (registry) configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var
from .errors import ConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, ShouldCacheHook
from .storage import get_http_cache_config

ORCID_BASE_URL = "https://pub.orcid.org/v3.0"
DEFAULT_ORCID_ID = "0000-0002-8428-1086"
DEFAULT_ORCID_BATCH_SIZE = 50


@dataclass(frozen=True, slots=True)
class OrcidConfig:
    """Holds the ORCID record to sync and how to reach the public API."""

    orcid_id: str
    resilience: ResilienceConfig
    batch_size: int = DEFAULT_ORCID_BATCH_SIZE

    def __post_init__(self) -> None:
        if self.batch_size < 1:
            raise ConfigurationError(f"ORCID batch size must be positive, got {self.batch_size}")


def get_orcid_config(
    *,
    resilience: ResilienceConfig | None = None,
    cache_predicate: ShouldCacheHook | None = None,
) -> OrcidConfig:
    return OrcidConfig(
        orcid_id=optional_env_var("ORCID_ID", DEFAULT_ORCID_ID) or DEFAULT_ORCID_ID,
        resilience=resilience
        or ResilienceConfig(
            name="orcid",
            base_url=ORCID_BASE_URL,
            ratelimit=RateLimit(max_calls=8, per_seconds=1.0),
            cache=get_http_cache_config("orcid", should_cache=cache_predicate),
            default_headers={"Accept": "application/json"},
        ),
    )
