"""
Shared test configuration.
Provides the application, client and parameter fixtures used across the suite.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from paramdisplay.app import create_app  # noqa: E402
from paramdisplay.config import TestingConfig  # noqa: E402
from paramdisplay.utils.parameters import Field  # noqa: E402


@pytest.fixture
def app():
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def status_field() -> Field:
    return Field(
        base_type="type/Integer",
        id=1,
        name="STATUS",
        display_name="Status",
        remapping={1: "Active", 2: "Closed"},
    )


@pytest.fixture
def region_field() -> Field:
    return Field(base_type="type/Text", id=2, name="REGION", display_name="Region")
