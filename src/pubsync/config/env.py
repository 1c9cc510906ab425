"""Environment variable loaders for configuration."""

from __future__ import annotations

import os


def optional_env_var(name: str, default: str | None = None) -> str | None:
    """Return an environment variable, treating missing or blank values as ``default``."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()
