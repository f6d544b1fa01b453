"""Integration tests for the graph_configuration management command."""

from __future__ import annotations

from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

pytestmark = pytest.mark.integration


def test_command_prints_canonical_string() -> None:
    """A valid delimited value is echoed in canonical form with a summary."""

    out = StringIO()
    call_command("graph_configuration", "+50!100!0!300!FIXED!yes", stdout=out)

    lines = out.getvalue().splitlines()
    assert lines[0] == "50!100!0!300!FIXED!1"
    assert "  size: 50x100" in lines
    assert "  builds: all" in lines
    assert "  days: 300" in lines
    assert "  graph: New and fixed warnings" in lines
    assert "  domain: build date" in lines


def test_command_accepts_structured_fields() -> None:
    """`--field` pairs are parsed as the structured form."""

    out = StringIO()
    call_command(
        "graph_configuration",
        "--field=width=50",
        "--field=height=100",
        "--field=buildCountString=",
        "--field=graphType=NONE",
        stdout=out,
    )

    assert out.getvalue().splitlines()[0] == "50!100!0!0!NONE!0"
    assert "Graph is hidden." in out.getvalue()


def test_command_rejects_invalid_value() -> None:
    """Invalid configurations raise CommandError."""

    with pytest.raises(CommandError, match="Invalid graph configuration"):
        call_command("graph_configuration", "50.1!50!12!13!FIXED!1", stdout=StringIO())


def test_command_requires_exactly_one_input() -> None:
    """Refuse to run without input or with both input forms."""

    with pytest.raises(CommandError, match="Nothing to validate"):
        call_command("graph_configuration", stdout=StringIO())
    with pytest.raises(CommandError, match="not both"):
        call_command("graph_configuration", "50!100!0!0!NONE!0", "--field=width=50", stdout=StringIO())
    with pytest.raises(CommandError, match="KEY=VALUE"):
        call_command("graph_configuration", "--field=width", stdout=StringIO())
