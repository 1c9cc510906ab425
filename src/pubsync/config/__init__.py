"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var
from .errors import ConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .openalex import OpenAlexConfig, get_openalex_config
from .orcid import OrcidConfig, get_orcid_config
from .storage import ContentConfig, get_content_config, get_http_cache_config

__all__ = [
    "CacheConfig",
    "ConfigurationError",
    "ContentConfig",
    "OpenAlexConfig",
    "OrcidConfig",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "configure_logging",
    "get_content_config",
    "get_http_cache_config",
    "get_openalex_config",
    "get_orcid_config",
    "optional_env_var",
]
