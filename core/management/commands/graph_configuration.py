"""Validate a trend graph configuration and print its canonical form."""

from __future__ import annotations

from django.core.management.base import BaseCommand, CommandError

from core.charting.graph_configuration import GraphConfiguration


class Command(BaseCommand):
    """Parse a graph configuration string or structured fields."""

    help = "Validate a trend graph configuration (width!height!builds!days!TYPE!useBuildDate)."

    def add_arguments(self, parser) -> None:
        """Add command arguments."""

        parser.add_argument(
            "value",
            nargs="?",
            default=None,
            help="Delimited configuration, e.g. 50!100!200!300!FIXED!1.",
        )
        parser.add_argument(
            "--field",
            action="append",
            default=[],
            metavar="KEY=VALUE",
            help="Structured configuration field (repeatable), e.g. --field graphType=FIXED.",
        )

    def handle(self, *args, **options) -> str | None:
        """Run the command."""

        value: str | None = options["value"]
        fields: list[str] = options["field"]

        if value is not None and fields:
            raise CommandError("Pass either a delimited value or --field pairs, not both.")
        if value is None and not fields:
            raise CommandError("Nothing to validate; pass a delimited value or --field pairs.")

        configuration = GraphConfiguration()
        if value is not None:
            accepted = configuration.initialize_from(value)
            source = value
        else:
            mapping: dict[str, str] = {}
            for pair in fields:
                key, sep, field_value = pair.partition("=")
                if not sep:
                    raise CommandError(f"Invalid --field {pair!r}; expected KEY=VALUE.")
                mapping[key.strip()] = field_value
            accepted = configuration.initialize_from_mapping(mapping)
            source = ", ".join(fields)

        if not accepted:
            raise CommandError(f"Invalid graph configuration: {source}")

        graph_type = configuration.graph_type
        self.stdout.write(configuration.serialize_to_string())
        self.stdout.write(f"  size: {configuration.width}x{configuration.height}")
        self.stdout.write(f"  builds: {configuration.build_count_string or 'all'}")
        self.stdout.write(f"  days: {configuration.day_count_string or 'all'}")
        self.stdout.write(f"  graph: {graph_type.label if graph_type is not None else '-'}")
        self.stdout.write(f"  domain: {'build date' if configuration.use_build_date_as_domain else 'build number'}")
        if not configuration.is_visible():
            self.stdout.write(self.style.WARNING("Graph is hidden."))
        return None
