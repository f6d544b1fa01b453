#!/usr/bin/env python
"""Command-line entry point for trendGraphs (e.g. `manage.py graph_configuration`)."""

from __future__ import annotations

import os
import sys


def main() -> None:
    """Run a management command."""

    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "trendGraphs.settings")
    try:
        from django.core.management import execute_from_command_line
    except ImportError as exc:
        raise ImportError(
            "Django is not installed or is not available on your PYTHONPATH."
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()

