"""Configuration value object for build-trend graphs.

A configuration selects the graph-type variant, the graph size, the build and
day windows, and the horizontal axis of a trend graph. It is initialized from
either a compact `!`-delimited string:

    width!height!buildCount!dayCount!graphType!useBuildDate
    e.g. 50!100!200!300!FIXED!1

or from the equivalent structured mapping (`width`, `height`,
`buildCountString`, `dayCountString`, `graphType`, `useBuildDateAsDomain`).

Initialization is replace-or-reset: a valid value replaces every field, an
invalid value resets every field to the configured defaults. Invalid values
never raise.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Final

from django.conf import settings

from analysis.graph_types import DEFAULT_REGISTRY, GraphTypeRegistry, GraphTypeSpec
from core.forms import GraphConfigurationForm

logger = logging.getLogger(__name__)

SEPARATOR: Final[str] = "!"
FIELD_NAMES: Final[tuple[str, ...]] = (
    "width",
    "height",
    "buildCountString",
    "dayCountString",
    "graphType",
    "useBuildDateAsDomain",
)

DEFAULT_WIDTH: Final[int] = 500
DEFAULT_HEIGHT: Final[int] = 200
DEFAULT_BUILD_COUNT: Final[int] = 0
DEFAULT_DAY_COUNT: Final[int] = 0
DEFAULT_GRAPH_TYPE: Final[str] = "NONE"
DEFAULT_USE_BUILD_DATE: Final[bool] = False


@dataclass(frozen=True, slots=True)
class GraphValues:
    """The complete set of values held by a GraphConfiguration.

    Args:
        width: Graph width in pixels.
        height: Graph height in pixels.
        build_count: Number of builds to show, 0 for all builds.
        day_count: Number of days to show, 0 for all days.
        graph_type: Selected variant, or None when no variant is available.
        use_build_date: Whether the x-axis is indexed by build date instead of build number.
    """

    width: int
    height: int
    build_count: int
    day_count: int
    graph_type: GraphTypeSpec | None
    use_build_date: bool


def default_values(registry: GraphTypeRegistry) -> GraphValues:
    """Return the default values for a registry, honoring `TREND_GRAPH_DEFAULTS`.

    Args:
        registry: Variants known to the configuration.

    Returns:
        GraphValues used for new and reset configurations.
    """

    overrides: dict[str, Any] = dict(getattr(settings, "TREND_GRAPH_DEFAULTS", {}))
    token = str(overrides.get("graph_type", DEFAULT_GRAPH_TYPE))
    graph_type = registry.get(token) or registry.empty_graph()
    return GraphValues(
        width=int(overrides.get("width", DEFAULT_WIDTH)),
        height=int(overrides.get("height", DEFAULT_HEIGHT)),
        build_count=int(overrides.get("build_count", DEFAULT_BUILD_COUNT)),
        day_count=int(overrides.get("day_count", DEFAULT_DAY_COUNT)),
        graph_type=graph_type,
        use_build_date=bool(overrides.get("use_build_date", DEFAULT_USE_BUILD_DATE)),
    )


class GraphConfiguration:
    """Validated display parameters for a build-trend graph."""

    def __init__(self, graph_types: GraphTypeRegistry | Iterable[GraphTypeSpec] = DEFAULT_REGISTRY) -> None:
        """Create a configuration in the default state.

        Args:
            graph_types: Known graph-type variants, either a registry or an iterable of specs.
        """

        if isinstance(graph_types, GraphTypeRegistry):
            self._registry = graph_types
        else:
            self._registry = GraphTypeRegistry(graph_types)
        # (values, is_default), always replaced together.
        self._state: tuple[GraphValues, bool] = (default_values(self._registry), True)

    def initialize_from(self, value: str | Mapping[str, object] | None) -> bool:
        """Initialize from a delimited string (or a structured mapping).

        Args:
            value: `width!height!buildCount!dayCount!graphType!useBuildDate`, or a
                mapping accepted by `initialize_from_mapping`.

        Returns:
            True when the value was accepted; False when it was rejected and the
            configuration was reset to its defaults.
        """

        if isinstance(value, Mapping):
            return self.initialize_from_mapping(value)
        if not isinstance(value, str) or not value:
            logger.debug("Rejected graph configuration %r: no value.", value)
            return self._replace_or_reset(None)

        parts = value.split(SEPARATOR)
        if len(parts) != len(FIELD_NAMES) or not all(parts):
            logger.debug(
                "Rejected graph configuration %r: expected %d non-empty %r-separated fields.",
                value,
                len(FIELD_NAMES),
                SEPARATOR,
            )
            return self._replace_or_reset(None)
        return self._replace_or_reset(self._parse(dict(zip(FIELD_NAMES, parts)), source=value))

    def initialize_from_mapping(self, value: Mapping[str, object] | None) -> bool:
        """Initialize from the structured configuration format.

        Keys are `width`, `height`, `buildCountString`, `dayCountString`,
        `graphType` and `useBuildDateAsDomain`; other keys are ignored. Blank
        build and day counts mean "all builds" and "all days".

        Returns:
            True when the value was accepted; False when it was rejected and the
            configuration was reset to its defaults.
        """

        if not isinstance(value, Mapping):
            logger.debug("Rejected graph configuration %r: not a mapping.", value)
            return self._replace_or_reset(None)
        data = {name: value[name] for name in FIELD_NAMES if name in value}
        return self._replace_or_reset(self._parse(data, source=value))

    def reset(self) -> None:
        """Return to the default state."""

        self._state = (default_values(self._registry), True)

    def serialize_to_string(self) -> str:
        """Return the `!`-delimited form accepted by `initialize_from`."""

        values = self._values
        return SEPARATOR.join(
            (
                str(values.width),
                str(values.height),
                str(values.build_count),
                str(values.day_count),
                values.graph_type.token if values.graph_type is not None else "",
                "1" if values.use_build_date else "0",
            )
        )

    def serialize_to_mapping(self) -> dict[str, str]:
        """Return the structured form accepted by `initialize_from_mapping`."""

        values = self._values
        return {
            "width": str(values.width),
            "height": str(values.height),
            "buildCountString": self.build_count_string,
            "dayCountString": self.day_count_string,
            "graphType": values.graph_type.token if values.graph_type is not None else "",
            "useBuildDateAsDomain": "true" if values.use_build_date else "false",
        }

    @property
    def _values(self) -> GraphValues:
        return self._state[0]

    @property
    def registered_graphs(self) -> tuple[GraphTypeSpec, ...]:
        return self._registry.list()

    @property
    def width(self) -> int:
        return self._values.width

    @property
    def height(self) -> int:
        return self._values.height

    @property
    def build_count(self) -> int:
        return self._values.build_count

    @property
    def day_count(self) -> int:
        return self._values.day_count

    @property
    def build_count_string(self) -> str:
        """Build count for form display; blank when all builds are shown."""

        return str(self.build_count) if self.is_build_count_defined() else ""

    @property
    def day_count_string(self) -> str:
        """Day count for form display; blank when all days are shown."""

        return str(self.day_count) if self.is_day_count_defined() else ""

    @property
    def graph_type(self) -> GraphTypeSpec | None:
        return self._values.graph_type

    @property
    def use_build_date_as_domain(self) -> bool:
        return self._values.use_build_date

    @property
    def is_default(self) -> bool:
        """True until a value is accepted, and again after a value is rejected."""

        return self._state[1]

    def is_build_count_defined(self) -> bool:
        return self.build_count > 0

    def is_day_count_defined(self) -> bool:
        return self.day_count > 0

    def is_visible(self) -> bool:
        """Return whether the selected variant shows a graph."""

        return self.graph_type is not None and self.graph_type.visible

    def _parse(self, data: dict[str, object], *, source: object) -> GraphValues | None:
        form = GraphConfigurationForm(data=data, registry=self._registry)
        if not form.is_valid():
            logger.debug("Rejected graph configuration %r: %s", source, form.errors.get_json_data())
            return None
        cleaned = form.cleaned_data
        return GraphValues(
            width=cleaned["width"],
            height=cleaned["height"],
            build_count=cleaned["buildCountString"],
            day_count=cleaned["dayCountString"],
            graph_type=self._registry.get(cleaned["graphType"]),
            use_build_date=cleaned["useBuildDateAsDomain"],
        )

    def _replace_or_reset(self, values: GraphValues | None) -> bool:
        if values is None:
            self.reset()
            return False
        self._state = (values, False)
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GraphConfiguration):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        state = "default" if self.is_default else "valid"
        return f"GraphConfiguration({self.serialize_to_string()!r}, {state})"

    __str__ = serialize_to_string
