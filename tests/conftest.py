"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
from shortlinks.config import Config, ServerConfig
from shortlinks.core.types import parse_mapping

NOT_FOUND_MESSAGE = "<h1>Not found</h1>"

SAMPLE_LINKS = {
    "docs": "https://example.com/docs",
    "team": {
        "$root": "https://example.com/team",
        "bob": "https://example.com/bob",
    },
    "a": {"b": {"c": "https://x"}},
}


@pytest.fixture
def test_config() -> Config:
    """Create an in-memory configuration with sample links."""
    return Config(
        not_found_message=NOT_FOUND_MESSAGE,
        links=parse_mapping(SAMPLE_LINKS),
        server=ServerConfig(),
    )


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write sample links to a shortlinks.json file and return its path."""
    path = tmp_path / "shortlinks.json"
    path.write_text(
        json.dumps({"not_found_message": NOT_FOUND_MESSAGE, "links": SAMPLE_LINKS})
    )
    return path
