"""Project command: reduce a JSON record to the requested fields."""

from __future__ import annotations

import json

import click

from jira_fields.entity_types import EntityType
from jira_fields.projection import ProjectionOptions, Projector


@click.command("project")
@click.argument("record_file", type=click.File("r", encoding="utf-8"))
@click.option(
    "-f",
    "--field",
    "fields",
    multiple=True,
    help="Dot-notation field path to keep (repeatable). None keeps the record as-is.",
)
@click.option(
    "--entity-type",
    type=click.Choice(EntityType.values(), case_sensitive=False),
    default=EntityType.issue.value,
    show_default=True,
    help="Entity category of the record.",
)
@click.option("--flat", is_flag=True, help="Key the output by literal field paths.")
@click.option("--report", is_flag=True, help="Also list fields that did not resolve.")
def project_cmd(record_file, fields: tuple[str, ...], entity_type: str, flat: bool, report: bool):
    """Project RECORD_FILE (JSON, '-' for stdin) onto the requested fields."""
    try:
        record = json.load(record_file)
    except json.JSONDecodeError as exc:
        raise click.ClickException(f"Invalid JSON in {record_file.name}: {exc}") from exc

    options = ProjectionOptions(
        entity_type=EntityType(entity_type.lower()), respect_nesting=not flat
    )
    projected, missing = Projector(options).project_with_report(record, list(fields))
    if report:
        click.echo(json.dumps({"record": projected, "missing": missing}, indent=2))
        return
    click.echo(json.dumps(projected, indent=2))


__all__ = ["project_cmd"]
