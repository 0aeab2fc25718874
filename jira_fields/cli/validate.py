"""Validate command: check field paths against an entity catalog."""

from __future__ import annotations

import click

from jira_fields.validation import format_field_warning, validate_field_paths

from .options import catalog_root_option, entity_type_argument, load_catalog, lookup_or_fail


@click.command("validate")
@entity_type_argument
@click.argument("paths", nargs=-1, required=True)
@catalog_root_option
def validate_cmd(entity_type: str, paths: tuple[str, ...], catalog_root: str | None):
    """Validate dot-notation PATHS for ENTITY_TYPE; exit 1 if any is invalid."""
    catalog = load_catalog(catalog_root)
    entity = lookup_or_fail(catalog, entity_type)
    result = validate_field_paths(catalog, entity.entity_type, paths)

    for path in result.valid_paths:
        click.echo(f"ok       {path}")
    if result.is_valid:
        return
    click.echo(format_field_warning(result), err=True)
    raise SystemExit(1)


__all__ = ["validate_cmd"]
