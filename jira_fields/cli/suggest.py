"""Suggest command: "did you mean" hints for a field name."""

from __future__ import annotations

import json

import click

from jira_fields.suggestions import DEFAULT_LIMIT, SuggestionEngine

from .options import catalog_root_option, entity_type_argument, load_catalog, lookup_or_fail


@click.command("suggest")
@entity_type_argument
@click.argument("field", type=str)
@click.option(
    "--limit", default=DEFAULT_LIMIT, show_default=True, help="Maximum alternatives"
)
@click.option("--meta", is_flag=True, help="Emit scored candidates as JSON")
@catalog_root_option
def suggest_cmd(
    entity_type: str, field: str, limit: int, meta: bool, catalog_root: str | None
):
    """Suggest catalog fields for FIELD of ENTITY_TYPE."""
    catalog = load_catalog(catalog_root)
    entity = lookup_or_fail(catalog, entity_type)
    engine = SuggestionEngine(catalog)

    if meta:
        ranked = engine.rank(entity.entity_type, field, max_suggestions=limit)
        click.echo(json.dumps([s.model_dump() for s in ranked], indent=2))
        return

    suggestion = engine.suggest(entity.entity_type, field, limit=limit)
    if suggestion.corrected:
        click.echo(f"Did you mean: {suggestion.corrected}")
    if suggestion.alternatives:
        click.echo("Alternatives: " + ", ".join(suggestion.alternatives))
    if not suggestion.corrected and not suggestion.alternatives:
        raise SystemExit(1)


__all__ = ["suggest_cmd"]
