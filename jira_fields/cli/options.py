"""Options and helpers shared by the CLI subcommands."""

from __future__ import annotations

import click

from jira_fields.catalog import CatalogNotFoundError, EntityFieldCatalog, FieldCatalog
from jira_fields.entity_types import EntityType

catalog_root_option = click.option(
    "--catalog-root",
    envvar="JIRA_FIELDS_CATALOG_ROOT",
    default=None,
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=str),
    help="Directory of <entity>.yml field catalogs (env: JIRA_FIELDS_CATALOG_ROOT)",
)

entity_type_argument = click.argument(
    "entity_type",
    type=click.Choice(EntityType.values(), case_sensitive=False),
)


def load_catalog(catalog_root: str | None) -> FieldCatalog:
    return FieldCatalog.from_directory(catalog_root)


def lookup_or_fail(catalog: FieldCatalog, entity_type: str) -> EntityFieldCatalog:
    """Return the entity catalog or exit with a usage error."""
    try:
        return catalog.lookup(entity_type)
    except CatalogNotFoundError as exc:
        raise click.BadParameter(str(exc), param_hint="ENTITY_TYPE") from exc
