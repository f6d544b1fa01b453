"""Pytest fixtures shared across trend graph tests."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from analysis.graph_types import NEW_VERSUS_FIXED, NONE, PRIORITY, GraphTypeRegistry
from core.charting.graph_configuration import GraphConfiguration


@pytest.fixture
def graph_types() -> GraphTypeRegistry:
    """Return the priority, new-versus-fixed and empty variants."""

    return GraphTypeRegistry(specs=(PRIORITY, NEW_VERSUS_FIXED, NONE))


@pytest.fixture
def configuration(graph_types) -> GraphConfiguration:
    """Return a fresh configuration in the default state."""

    return GraphConfiguration(graph_types)


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests that only need Django settings.
    - `integration`: tests running management commands or other Django machinery.

    Each test must have exactly one of these markers.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
