"""Shared pytest fixtures for all tests."""
import json
from pathlib import Path

import pytest

from model_structure import Database

SAMPLES_DIR = Path(__file__).parent.parent / "samples"


@pytest.fixture
def samples_dir() -> Path:
    return SAMPLES_DIR


@pytest.fixture
def ecommerce_bundle() -> dict:
    with open(SAMPLES_DIR / "ecommerce.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def multi_schema_bundle() -> dict:
    with open(SAMPLES_DIR / "multi_schema.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def ecommerce(ecommerce_bundle) -> Database:
    return Database(ecommerce_bundle)


@pytest.fixture
def multi_schema(multi_schema_bundle) -> Database:
    return Database(multi_schema_bundle)
