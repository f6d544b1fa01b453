"""Forms for trend graph configuration values.

Both configuration formats (the `!`-delimited string and the structured
mapping) are bound to `GraphConfigurationForm`, so every value goes through
the same field rules regardless of where it came from.
"""

from __future__ import annotations

import re

from django import forms

from analysis.graph_types import DEFAULT_REGISTRY, GraphTypeRegistry

TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


class StrictIntegerField(forms.IntegerField):
    """IntegerField that accepts plain integer notation only.

    Django's IntegerField tolerates surrounding whitespace and a trailing
    `.0`; configuration values must be written as digits with an optional sign.
    """

    _INTEGER_RE = re.compile(r"[+-]?[0-9]+")

    def to_python(self, value: object) -> int | None:
        if value in self.empty_values:
            return None
        if isinstance(value, bool):
            raise forms.ValidationError(self.error_messages["invalid"], code="invalid")
        text = str(value)
        if not self._INTEGER_RE.fullmatch(text):
            raise forms.ValidationError(self.error_messages["invalid"], code="invalid")
        try:
            return int(text)
        except (ValueError, TypeError):
            raise forms.ValidationError(self.error_messages["invalid"], code="invalid")


class LenientBooleanField(forms.Field):
    """Boolean field that maps unrecognized values to False."""

    def __init__(self, **kwargs) -> None:
        kwargs.setdefault("required", False)
        super().__init__(**kwargs)

    def to_python(self, value: object) -> bool:
        if isinstance(value, bool):
            return value
        if value is None:
            return False
        return str(value).strip().casefold() in TRUE_VALUES


class GraphConfigurationForm(forms.Form):
    """Validate the six values of a trend graph configuration.

    Field names match the keys of the structured configuration format.
    """

    width = StrictIntegerField(min_value=1, label="Width")
    height = StrictIntegerField(min_value=1, label="Height")
    buildCountString = StrictIntegerField(
        required=False,
        min_value=0,
        label="Number of builds",
        help_text="Leave blank (or 0) to include all builds.",
    )
    dayCountString = StrictIntegerField(
        required=False,
        min_value=0,
        label="Number of days",
        help_text="Leave blank (or 0) to include all days.",
    )
    graphType = forms.ChoiceField(choices=(), label="Graph type")
    useBuildDateAsDomain = LenientBooleanField(label="Use build date as domain")

    def __init__(self, *args, registry: GraphTypeRegistry = DEFAULT_REGISTRY, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.registry = registry
        self.fields["graphType"].choices = [(spec.token, spec.label) for spec in registry.list()]

    def clean(self) -> dict[str, object]:
        """Treat blank build/day counts as undefined (0)."""

        cleaned = super().clean()
        for name in ("buildCountString", "dayCountString"):
            if name not in self.errors and cleaned.get(name) is None:
                cleaned[name] = 0
        return cleaned
