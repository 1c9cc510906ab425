from __future__ import annotations

import pytest

from pubsync.domain.identifiers import (
    SLUG_MAX_LENGTH,
    format_doi_url,
    is_doi_url,
    normalize_doi,
    slugify,
)


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("C++ & Distributed Systems!!", "c-distributed-systems"),
        ("Hello, World: A Study", "hello-world-a-study"),
        ("Machine Learning -- A Survey", "machine-learning-a-survey"),
        ("Coral   reefs\tand\nclimate", "coral-reefs-and-climate"),
        ("Ünïcode Títle 2024", "ncode-ttle-2024"),
        ("!!!", ""),
    ],
)
def test_slugify(title: str, expected: str) -> None:
    assert slugify(title) == expected


def test_slugify_punctuation_only_difference_collides() -> None:
    assert slugify("C++ & Distributed Systems!!") == slugify("C   Distributed Systems")


def test_slugify_truncates_and_drops_trailing_hyphen() -> None:
    title = "a" * (SLUG_MAX_LENGTH - 1) + " tail"

    slug = slugify(title)

    assert slug == "a" * (SLUG_MAX_LENGTH - 1)
    assert not slug.endswith("-")


def test_slugify_long_title_stays_within_limit() -> None:
    title = " ".join(["reconciliation"] * 20)

    slug = slugify(title)

    assert len(slug) <= SLUG_MAX_LENGTH
    assert slug.startswith("reconciliation-reconciliation")


@pytest.mark.parametrize(
    ("doi", "expected"),
    [
        ("https://doi.org/10.1000/ABC.def", "10.1000/abc.def"),
        ("HTTP://DOI.ORG/10.1000/xyz", "10.1000/xyz"),
        ("10.1000/xyz ", "10.1000/xyz"),
        ("https://dx.doi.org/10.1000/ABC", "10.1000/abc"),
        ("http://DX.DOI.ORG/10.1000/abc", "10.1000/abc"),
        ("doi:10.1000/ABC", "10.1000/abc"),
        (" DOI: 10.1000/abc", "10.1000/abc"),
    ],
)
def test_normalize_doi(doi: str, expected: str) -> None:
    assert normalize_doi(doi) == expected


@pytest.mark.parametrize(
    "doi",
    [
        "10.1000/Coral.2021",
        "https://doi.org/10.1000/Coral.2021",
        "https://dx.doi.org/10.1000/Coral.2021",
        "doi:10.1000/Coral.2021",
        " 10.1000/Coral.2021 ",
    ],
)
def test_format_doi_url(doi: str) -> None:
    assert format_doi_url(doi) == "https://doi.org/10.1000/Coral.2021"


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://doi.org/10.1000/xyz", True),
        ("http://dx.doi.org/10.1000/xyz", True),
        ("https://repo.example.org/paper.pdf", False),
        ("https://example.org/doi.org/10.1000/xyz", False),
        ("ftp://doi.org/10.1000/xyz", False),
        ("not a url", False),
    ],
)
def test_is_doi_url(url: str, expected: bool) -> None:
    assert is_doi_url(url) is expected
