"""Graph-type variants available to trend graph configurations.

A graph-type variant describes one kind of build-trend graph (priorities,
new versus fixed warnings, ...). Configurations reference a variant by its
token, so the token is part of the serialized configuration format and must
stay stable.

The registry remains Django-free and describes variants only. Drawing the
graphs is not part of this package.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Iterable


@dataclass(frozen=True, slots=True)
class GraphTypeSpec:
    """Describe a selectable graph-type variant.

    Args:
        token: Stable identifier used in serialized configurations (case-sensitive).
        label: Human-friendly label.
        visible: Whether selecting this variant shows a graph at all.
    """

    token: str
    label: str
    visible: bool = True


class GraphTypeRegistry:
    """Token lookup for graph-type variants."""

    def __init__(self, specs: Iterable[GraphTypeSpec]) -> None:
        """Initialize a registry from a collection of specs."""

        self._specs: dict[str, GraphTypeSpec] = {}
        for spec in specs:
            if not spec.token:
                raise ValueError(f"GraphTypeSpec {spec.label!r} has an empty token.")
            if spec.token in self._specs:
                raise ValueError(f"Duplicate GraphTypeSpec token: {spec.token!r}")
            self._specs[spec.token] = spec

    def __contains__(self, spec: object) -> bool:
        return isinstance(spec, GraphTypeSpec) and self._specs.get(spec.token) == spec

    def __len__(self) -> int:
        return len(self._specs)

    def get(self, token: str) -> GraphTypeSpec | None:
        """Return the spec for a token, or None when missing."""

        return self._specs.get(token)

    def list(self) -> tuple[GraphTypeSpec, ...]:
        """Return all specs in a stable order."""

        return tuple(self._specs[token] for token in sorted(self._specs.keys()))

    def tokens(self) -> tuple[str, ...]:
        """Return all registered tokens in a stable order."""

        return tuple(sorted(self._specs.keys()))

    def empty_graph(self) -> GraphTypeSpec | None:
        """Return the variant that hides the graph, or None when none is registered."""

        for spec in self.list():
            if not spec.visible:
                return spec
        return None


NONE: Final[GraphTypeSpec] = GraphTypeSpec(token="NONE", label="No graph", visible=False)
PRIORITY: Final[GraphTypeSpec] = GraphTypeSpec(token="PRIORITY", label="Warnings by priority")
NEW_VERSUS_FIXED: Final[GraphTypeSpec] = GraphTypeSpec(token="FIXED", label="New and fixed warnings")
TOTALS: Final[GraphTypeSpec] = GraphTypeSpec(token="TOTALS", label="Total number of warnings")
DIFFERENCE: Final[GraphTypeSpec] = GraphTypeSpec(
    token="DIFFERENCE",
    label="Difference between new and fixed warnings",
)
HEALTH: Final[GraphTypeSpec] = GraphTypeSpec(token="HEALTH", label="Warnings by health thresholds")

DEFAULT_REGISTRY: Final[GraphTypeRegistry] = GraphTypeRegistry(
    specs=(NONE, PRIORITY, NEW_VERSUS_FIXED, TOTALS, DIFFERENCE, HEALTH)
)
