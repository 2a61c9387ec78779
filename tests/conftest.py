"""Pytest configuration and shared fixtures for casework tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from casework.domain import (
    DEFAULT_STANDARDS,
    Cabinet,
    ConstructionStandards,
    DesignState,
    Drawer,
)

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "projects"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Domain fixtures
# =============================================================================


@pytest.fixture
def standards() -> ConstructionStandards:
    """Default construction standards."""
    return DEFAULT_STANDARDS


@pytest.fixture
def plain_cabinet() -> Cabinet:
    """24" base cabinet with one shelf, no doors and no drawers."""
    return Cabinet(id="plain", name="Plain Base", width=24, height=34.5, depth=24)


@pytest.fixture
def sink_base() -> Cabinet:
    """24" base cabinet with one shaker door over one 6" drawer."""
    return Cabinet(
        id="cab-1",
        name="Sink Base",
        width=24,
        height=34.5,
        depth=24,
        doors=1,
        drawers=(Drawer(id="drw-1", height=6, start_y=4),),
    )


@pytest.fixture
def design_state(sink_base: Cabinet) -> DesignState:
    """Design holding the sink base."""
    return DesignState(cabinets=(sink_base,), project_name="Test Kitchen")


# =============================================================================
# Project file fixtures
# =============================================================================


@pytest.fixture
def fixtures_path() -> Path:
    return FIXTURES_PATH


@pytest.fixture
def kitchen_path() -> Path:
    """Two-cabinet project file (frameless sink base and face-frame base)."""
    return FIXTURES_PATH / "kitchen.json"


@pytest.fixture
def kitchen_data(kitchen_path: Path) -> dict[str, Any]:
    return json.loads(kitchen_path.read_text(encoding="utf-8"))
