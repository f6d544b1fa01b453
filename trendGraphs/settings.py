"""Django settings for trendGraphs.

Configuration is driven by environment variables so deployments can change
graph defaults and logging without code changes.
"""

from __future__ import annotations

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

def _env_bool(name: str, *, default: bool) -> bool:
    """Parse a boolean environment variable.

    Args:
        name: Environment variable name.
        default: Value when the variable is not set.

    Returns:
        Parsed boolean value.
    """

    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "t", "yes", "y", "on"}


def _env_int(name: str, *, default: int) -> int:
    """Parse an integer environment variable.

    Args:
        name: Environment variable name.
        default: Value when the variable is not set.

    Returns:
        Parsed integer value.
    """

    raw = os.getenv(name)
    if raw is None:
        return default
    return int(raw.strip())


def _env_csv(name: str, *, default: list[str]) -> list[str]:
    """Parse a comma-separated environment variable into a list of strings.

    Args:
        name: Environment variable name.
        default: Value when the variable is not set.

    Returns:
        A list of non-empty, trimmed values.
    """

    raw = os.getenv(name)
    if raw is None:
        return default
    return [part.strip() for part in raw.split(",") if part.strip()]

DEBUG = _env_bool("DJANGO_DEBUG", default=True)

_DEV_SECRET_KEY = "dev-only-insecure-secret-key"
SECRET_KEY = os.getenv("DJANGO_SECRET_KEY") or (_DEV_SECRET_KEY if DEBUG else "")
if not SECRET_KEY:
    raise RuntimeError("DJANGO_SECRET_KEY is required when DJANGO_DEBUG is False.")

ALLOWED_HOSTS: list[str] = _env_csv(
    "DJANGO_ALLOWED_HOSTS",
    default=["localhost", "127.0.0.1", "[::1]"],
)

INSTALLED_APPS = [
    "core.apps.CoreConfig",
]

DATABASES: dict[str, dict[str, object]] = {}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Baseline values of a trend graph configuration that has not been initialized
# (or whose last initialization was rejected).
TREND_GRAPH_DEFAULTS = {
    "width": _env_int("TREND_GRAPH_DEFAULT_WIDTH", default=500),
    "height": _env_int("TREND_GRAPH_DEFAULT_HEIGHT", default=200),
    "build_count": _env_int("TREND_GRAPH_DEFAULT_BUILD_COUNT", default=0),
    "day_count": _env_int("TREND_GRAPH_DEFAULT_DAY_COUNT", default=0),
    "graph_type": os.getenv("TREND_GRAPH_DEFAULT_GRAPH_TYPE", "NONE"),
    "use_build_date": _env_bool("TREND_GRAPH_DEFAULT_USE_BUILD_DATE", default=False),
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "root": {"handlers": ["console"], "level": "WARNING"},
    "loggers": {
        "core": {
            "level": os.getenv("TREND_GRAPH_LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper(),
            "propagate": True,
        },
    },
}
