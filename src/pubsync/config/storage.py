"""Output and cache locations for the publication sync."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Final

from .env import optional_env_var
from .http_resilience import CacheConfig

if TYPE_CHECKING:
    from .http_resilience import ShouldCacheHook

DEFAULT_OUTPUT_DIR: Final[str] = "src/content/publications"
DOCUMENT_EXTENSION: Final[str] = ".mdx"
APP_DIR_NAME: Final[str] = "pubsync"
HTTP_CACHE_SUFFIX: Final[str] = "_http_cache.db"
DEFAULT_HTTP_CACHE_TTL_SECONDS: Final[float] = 3600.0


@dataclass(frozen=True, slots=True)
class ContentConfig:
    output_dir: Path
    extension: str = DOCUMENT_EXTENSION

    def resolve_output_dir(self) -> Path:
        return self.output_dir.expanduser().resolve()


def get_content_config(*, output_dir: Path | str | None = None) -> ContentConfig:
    if output_dir is None:
        output_dir = optional_env_var("PUBSYNC_OUTPUT_DIR", DEFAULT_OUTPUT_DIR) or DEFAULT_OUTPUT_DIR
    return ContentConfig(output_dir=Path(output_dir))


def _default_cache_dir() -> Path:
    if os.name == "nt":
        base = optional_env_var("LOCALAPPDATA")
        base_path = Path(base) if base else (Path.home() / "AppData" / "Local")
    else:
        base = optional_env_var("XDG_CACHE_HOME")
        base_path = Path(base) if base else (Path.home() / ".cache")
    return base_path / APP_DIR_NAME


def http_cache_path(name: str) -> Path:
    """Location of the response cache database for the source called ``name``."""

    env_dir = optional_env_var("PUBSYNC_CACHE_DIR")
    cache_dir = Path(env_dir) if env_dir else _default_cache_dir()
    return cache_dir.expanduser().resolve() / f"{name}{HTTP_CACHE_SUFFIX}"


def get_http_cache_config(
    name: str,
    *,
    should_cache: ShouldCacheHook | None = None,
) -> CacheConfig:
    """Persistent per-source response cache, shared by consecutive runs."""

    return CacheConfig(
        backend="sqlite",
        sqlite_path=str(http_cache_path(name)),
        default_ttl_seconds=DEFAULT_HTTP_CACHE_TTL_SECONDS,
        should_cache=should_cache,
    )
