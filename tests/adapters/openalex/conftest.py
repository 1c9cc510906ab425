"""Shared fixtures for OpenAlex adapter tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

OpenAlexPayload = dict[str, object]
FIXTURES = Path("tests/data/openalex")


@pytest.fixture
def works_payload() -> OpenAlexPayload:
    return json.loads((FIXTURES / "works.json").read_text())


@pytest.fixture
def work_payloads(works_payload: OpenAlexPayload) -> list[OpenAlexPayload]:
    results = works_payload["results"]
    assert isinstance(results, list)
    return results
