"""Shared pytest fixtures for the PWV terminal test suite."""

from __future__ import annotations

import random
import sys
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from pwv_terminal.interfaces.llm_provider import ILLMProvider
from pwv_terminal.models.corpus import Corpus
from pwv_terminal.services.query_engine import QueryEngine
from pwv_terminal.utils.logging import configure_logging

# ---------------------------------------------------------------------------
# Sample corpus
# ---------------------------------------------------------------------------
#
# Three posts: two dated, one undated.  "Acme" appears in all three, so its
# timeline exercises the "Unknown" date; "robotics" and "developer tools"
# tie on mentions.


def _sample_document() -> dict[str, Any]:
    return {
        "posts": {
            "acme-seed": {
                "title": "Acme Raises $10M Seed",
                "pubDate": "2024-01-01",
                "author": "Tom Preston-Werner",
                "tags": ["portfolio"],
                "companies": ["Acme"],
                "investors": ["PWV"],
                "people": [{"name": "Jane Doe", "role": "CEO"}],
                "facts": [
                    {"text": "Acme raised a $10M seed round.", "category": "funding", "date": "2024-01-01"},
                ],
                "figures": [{"value": "$10M", "context": "seed round"}],
                "topics": ["robotics"],
                "quotes": [{"quote": "Robots learn by watching.", "speaker": "Jane Doe"}],
            },
            "year-review": {
                "title": "Year in Review",
                "pubDate": "2023-12-31",
                "author": "David Price",
                "tags": ["year in review"],
                "companies": ["Acme", "Nimbus"],
                "investors": [],
                "people": [{"name": "Tom Preston-Werner", "role": "Founding Partner"}],
                "facts": [
                    {"text": "PWV made 24 investments.", "category": "milestone", "date": "2023-12-31"},
                ],
                "figures": [],
                "topics": ["robotics", "developer tools"],
                "quotes": [
                    {"quote": "We invest to help make the future possible.", "speaker": "Tom Preston-Werner"},
                ],
            },
            "undated-note": {
                "title": "Undated Note",
                "companies": ["Acme"],
                "facts": [{"text": "An undated insight.", "category": "insight"}],
                "topics": ["developer tools"],
            },
        },
        "entities": {
            "companies": {
                "Acme": {"posts": ["acme-seed", "year-review", "undated-note"], "mentions": 3},
                "Nimbus": {"posts": ["year-review"], "mentions": 1},
            },
            "investors": {
                "PWV": {"posts": ["acme-seed"], "mentions": 1},
            },
            "people": {
                "Jane Doe": {"posts": ["acme-seed"], "mentions": 1, "role": "CEO"},
                "Tom Preston-Werner": {"posts": ["year-review"], "mentions": 1, "role": "Founding Partner"},
            },
            "topics": {
                "robotics": {"posts": ["acme-seed", "year-review"], "mentions": 2},
                "developer tools": {"posts": ["year-review", "undated-note"], "mentions": 2},
            },
            "quotes": [
                {
                    "quote": "Robots learn by watching.",
                    "speaker": "Jane Doe",
                    "postSlug": "acme-seed",
                    "postTitle": "Acme Raises $10M Seed",
                    "pubDate": "2024-01-01",
                },
                {
                    "quote": "We invest to help make the future possible.",
                    "speaker": "Tom Preston-Werner",
                    "postSlug": "year-review",
                    "postTitle": "Year in Review",
                    "pubDate": "2023-12-31",
                },
            ],
        },
        "portfolio": {
            "representative": [
                {"name": "Acme", "url": "https://acme.example.com", "slug": "acme", "tags": ["robotics"]},
            ],
            "fundOne": [
                {"name": "Zephyr", "url": "https://zephyr.example.com", "slug": "zephyr", "tags": ["ai"]},
            ],
            "rollingFund": [],
            "angel": [],
        },
        "team": [
            {
                "name": "Tom Preston-Werner",
                "slug": "tom-preston-werner",
                "title": "Founding Partner",
                "bio": "Co-founder of GitHub. Creator of Jekyll and TOML. Angel investor.",
                "github": "mojombo",
                "twitter": "mojombo",
                "linkedin": "tom-preston-werner",
                "website": "https://tom.preston-werner.com",
                "isGeneralPartner": True,
            },
            {
                "name": "David Price",
                "slug": "david-price",
                "title": "Partner",
                "bio": "Operator turned investor.",
                "linkedin": "david-price",
            },
            {
                "name": "David Thyresson",
                "slug": "david-thyresson",
                "title": "Partner",
                "bio": "RedwoodJS core team member. Writes about AI.",
                "github": "dthyresson",
                "bluesky": "dthyresson.com",
                "website": "https://dthyresson.com",
            },
        ],
        "metadata": {
            "extractedAt": "2024-01-02T00:00:00+00:00",
            "totalPosts": 3,
            "dateRange": {"oldest": "2023-12-31", "newest": "2024-01-01"},
        },
    }


@pytest.fixture(autouse=True, scope="session")
def _test_logging() -> None:
    """Route log lines to stderr once, before any test captures output."""
    configure_logging(log_level="WARNING", stream=sys.stderr)


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def corpus_document() -> dict[str, Any]:
    """A fresh copy of the sample corpus document (camelCase keys)."""
    return _sample_document()


@pytest.fixture
def corpus(corpus_document: dict[str, Any]) -> Corpus:
    return Corpus.model_validate(corpus_document)


@pytest.fixture
def empty_corpus() -> Corpus:
    return Corpus()


@pytest.fixture
def rng() -> random.Random:
    """Seeded source of randomness so random picks are repeatable."""
    return random.Random(1234)


@pytest.fixture
def engine(corpus: Corpus, rng: random.Random) -> QueryEngine:
    return QueryEngine(corpus, rng=rng)


@pytest.fixture
def mock_llm() -> MagicMock:
    """LLM provider whose complete() returns an empty JSON object."""
    mock = MagicMock(spec=ILLMProvider)
    mock.complete = AsyncMock(return_value="{}")
    mock.get_provider_name.return_value = "mock-llm"
    mock.is_available.return_value = True
    mock.validate_credentials = AsyncMock(return_value=True)
    return mock
