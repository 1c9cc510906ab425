from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from pubsync.config.http_resilience import ResilienceConfig, RetryPolicy
from pubsync.config.openalex import OPENALEX_BASE_URL, OpenAlexConfig
from pubsync.config.orcid import ORCID_BASE_URL, OrcidConfig

if TYPE_CHECKING:
    from pathlib import Path

TEST_ORCID_ID = "0000-0001-2345-6789"
TEST_OPENALEX_AUTHOR_ID = "a123456789"


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in ("ORCID_ID", "OPENALEX_AUTHOR_ID", "OPENALEX_API_KEY", "PUBSYNC_OUTPUT_DIR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("PUBSYNC_CACHE_DIR", str(tmp_path / "http-cache"))


@pytest.fixture
def orcid_config() -> OrcidConfig:
    return OrcidConfig(
        orcid_id=TEST_ORCID_ID,
        resilience=ResilienceConfig(
            name="orcid",
            base_url=ORCID_BASE_URL,
            retry=RetryPolicy(total=0),
            cache=None,
        ),
    )


@pytest.fixture
def openalex_config() -> OpenAlexConfig:
    return OpenAlexConfig(
        author_id=TEST_OPENALEX_AUTHOR_ID,
        api_key="test-key",
        resilience=ResilienceConfig(
            name="openalex",
            base_url=OPENALEX_BASE_URL,
            retry=RetryPolicy(total=0),
            cache=None,
        ),
    )
