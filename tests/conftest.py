"""Pytest fixtures for cyrlat tests."""

import json
import logging

import pytest

from cyrlat.models import Schema
from cyrlat.schemas import load_schema


@pytest.fixture
def wikipedia():
    """Bundled wikipedia schema."""
    return load_schema("wikipedia")


@pytest.fixture
def toy_schema():
    """Small schema exercising every table."""
    return Schema(
        name="toy",
        mapping={"а": "a", "б": "b", "в": "v", "г": "g"},
        prev_mapping={"аб": "p", "г": "gh"},
        next_mapping={"ба": "n", "бв": "n"},
        ending_mapping={"в": "e", "бв": "bv!", "аг": "ag!"},
    )


@pytest.fixture
def sample_definition():
    """Valid schema definition as parsed JSON."""
    return {
        "name": "sample",
        "description": "Sample schema",
        "url": "https://example.org/sample",
        "mapping": {"а": "a", "б": "b", "ш": "sh"},
        "ending_mapping": {"аш": "ash!"},
        "samples": [["баш", "bash!"], ["Шаба", "Shaba"]],
    }


@pytest.fixture
def definition_file(tmp_path, sample_definition):
    """Valid schema definition written to disk."""
    path = tmp_path / "sample.json"
    path.write_text(json.dumps(sample_definition, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def test_logger() -> logging.Logger:
    """Create a test logger."""
    logger = logging.getLogger("cyrlat_test")
    logger.setLevel(logging.DEBUG)
    return logger
