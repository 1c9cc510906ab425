"""Shared fixtures for ORCID adapter tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

OrcidPayload = dict[str, object]
FIXTURES = Path("tests/data/orcid")


def _load(name: str) -> OrcidPayload:
    return json.loads((FIXTURES / name).read_text())


@pytest.fixture
def works_payload() -> OrcidPayload:
    return _load("works.json")


@pytest.fixture
def bulk_payload() -> OrcidPayload:
    return _load("bulk.json")


@pytest.fixture
def bulk_works(bulk_payload: OrcidPayload) -> list[OrcidPayload]:
    entries = bulk_payload["bulk"]
    assert isinstance(entries, list)
    return [entry["work"] for entry in entries if "work" in entry]
