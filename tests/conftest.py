"""
Shared pytest fixtures and configuration for netspine tests.

This module provides:
- Quiet logging for the whole session
- Settings cache isolation between tests
- A sample host document and evaluation contexts over it
- A freshly built operator registry

Usage:
    Fixtures are auto-discovered by pytest. Simply use them as function
    arguments (pytest injects them automatically).
"""

import sys
from pathlib import Path
from typing import Any, Generator

import pytest

# Ensure netspine package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from netspine.core.cursor import Cursor
from netspine.core.logging import configure_logging
from netspine.core.settings import reset_settings
from netspine.framework.evaluator import EvaluationContext
from netspine.framework.registry import OperatorRegistry, build_default_registry


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests based on their location."""
    for item in items:
        test_path = Path(item.fspath).relative_to(Path(__file__).parent)

        if "integration" in str(test_path):
            item.add_marker(pytest.mark.integration)

        markers = {mark.name for mark in item.iter_markers()}
        if not markers.intersection({"unit", "integration"}):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(scope="session", autouse=True)
def quiet_logging() -> None:
    """Keep operator DEBUG chatter out of test output."""
    configure_logging(level="WARNING", json_format=False, force=True)


@pytest.fixture(autouse=True)
def clean_settings() -> Generator[None, None, None]:
    """Re-read settings from the (monkeypatched) environment in every test."""
    reset_settings()
    yield
    reset_settings()


# =============================================================================
# Sample Documents
# =============================================================================


@pytest.fixture
def sample_tree() -> dict[str, Any]:
    """
    A small deployment manifest of the kind operators are evaluated in.

    meta.net is a block, meta.gateway a bare address, and the networks list
    is addressable by position or by name.
    """
    return {
        "meta": {
            "net": "10.0.0.0/24",
            "gateway": "10.0.0.1",
            "offset": 5,
            "offset_text": "7",
            "count": 3,
            "ranges": ["10.0.0.0/28", "10.0.1.0/28"],
            "options": {"dns": "8.8.8.8"},
        },
        "networks": [
            {"name": "z1", "range": "10.1.0.0/16", "static": None},
            {"name": "z2", "range": "2001:db8::/64", "static": None},
        ],
    }


@pytest.fixture
def ev(sample_tree: dict[str, Any]) -> EvaluationContext:
    """Evaluation context over sample_tree, resolving references by walking it."""
    return EvaluationContext(tree=sample_tree, here=Cursor.parse("networks.z1.static"))


@pytest.fixture
def registry() -> OperatorRegistry:
    """Registry with the built-in operators, default settings."""
    return build_default_registry()
