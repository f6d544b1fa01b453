"""Tests for GraphConfigurationForm field rules."""

from __future__ import annotations

import pytest

from analysis.graph_types import NEW_VERSUS_FIXED, PRIORITY, GraphTypeRegistry
from core.forms import GraphConfigurationForm

pytestmark = pytest.mark.unit


def _data(**changes: object) -> dict[str, object]:
    data: dict[str, object] = {
        "width": "50",
        "height": "100",
        "buildCountString": "200",
        "dayCountString": "300",
        "graphType": "FIXED",
        "useBuildDateAsDomain": "1",
    }
    data.update(changes)
    return data


def test_form_cleans_valid_data() -> None:
    """Clean valid values into ints, a token and a bool."""

    form = GraphConfigurationForm(data=_data())

    assert form.is_valid(), form.errors
    assert form.cleaned_data == {
        "width": 50,
        "height": 100,
        "buildCountString": 200,
        "dayCountString": 300,
        "graphType": "FIXED",
        "useBuildDateAsDomain": True,
    }


@pytest.mark.parametrize("value", ["50.1", "50.0", "1e3", " 50", "50 ", "fifty", "5_0", "0x32", True])
def test_form_rejects_non_integer_width(value) -> None:
    """Only plain integer notation is accepted."""

    form = GraphConfigurationForm(data=_data(width=value))

    assert not form.is_valid()
    assert "width" in form.errors


def test_form_enforces_ranges() -> None:
    """Width and height must be positive; counts must not be negative."""

    form = GraphConfigurationForm(data=_data(width="0", height="-5", buildCountString="-1", dayCountString="-2"))

    assert not form.is_valid()
    assert set(form.errors) == {"width", "height", "buildCountString", "dayCountString"}


def test_form_defaults_blank_counts_to_zero() -> None:
    """Blank counts clean to 0."""

    form = GraphConfigurationForm(data=_data(buildCountString="", dayCountString=None))

    assert form.is_valid(), form.errors
    assert form.cleaned_data["buildCountString"] == 0
    assert form.cleaned_data["dayCountString"] == 0


def test_form_limits_graph_type_to_registry() -> None:
    """Graph type choices come from the injected registry."""

    registry = GraphTypeRegistry(specs=(PRIORITY, NEW_VERSUS_FIXED))

    assert GraphConfigurationForm(data=_data(graphType="PRIORITY"), registry=registry).is_valid()
    form = GraphConfigurationForm(data=_data(graphType="NONE"), registry=registry)
    assert not form.is_valid()
    assert "graphType" in form.errors


@pytest.mark.parametrize(
    ("value", "expected"),
    [("1", True), ("on", True), ("Yes", True), (True, True), ("0", False), ("", False), (False, False), ("x", False)],
)
def test_form_parses_build_date_flag_leniently(value, expected) -> None:
    """Recognized true values are True; anything else is False."""

    form = GraphConfigurationForm(data=_data(useBuildDateAsDomain=value))

    assert form.is_valid(), form.errors
    assert form.cleaned_data["useBuildDateAsDomain"] is expected
