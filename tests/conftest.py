"""Shared fixtures for knack-openapi tests."""
import json
from pathlib import Path

import pytest

from knack_openapi.schemas.knack import KnackSchema

FIXTURES_DIR = Path(__file__).parent / "fixtures"
SAMPLE_SCHEMA_PATH = FIXTURES_DIR / "sample_application_schema.json"


@pytest.fixture
def sample_schema_path() -> Path:
    return SAMPLE_SCHEMA_PATH


@pytest.fixture
def sample_schema_dict() -> dict:
    return json.loads(SAMPLE_SCHEMA_PATH.read_text(encoding="utf-8"))


@pytest.fixture
def sample_schema(sample_schema_dict) -> KnackSchema:
    return KnackSchema.model_validate(sample_schema_dict)


@pytest.fixture
def make_schema():
    """Build a KnackSchema from bare object and scene dicts."""
    def _make(objects=None, scenes=None, **extra) -> KnackSchema:
        return KnackSchema.model_validate({
            "application": {
                "name": "Test App",
                "objects": objects or [],
                "scenes": scenes or [],
            },
            **extra,
        })
    return _make
