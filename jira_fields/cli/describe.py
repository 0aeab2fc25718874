"""Describe command: dump an entity catalog overview as JSON."""

from __future__ import annotations

import json

import click

from .options import catalog_root_option, entity_type_argument, load_catalog, lookup_or_fail


@click.command("describe")
@entity_type_argument
@catalog_root_option
def describe_cmd(entity_type: str, catalog_root: str | None):
    """Print the field catalog of ENTITY_TYPE."""
    entity = lookup_or_fail(load_catalog(catalog_root), entity_type)
    click.echo(json.dumps(entity.summary(), indent=2))


__all__ = ["describe_cmd"]
