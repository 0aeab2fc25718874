"""Per-entity field catalogs.

:class:`FieldCatalog` is the immutable, process-wide collection of
:class:`EntityFieldCatalog` values. It is built once (normally at server start)
and passed explicitly to the suggestion engine, validator and tools; there is
no module-level singleton. Refreshing statistics means building a new
``FieldCatalog`` from regenerated YAML files.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path
from types import MappingProxyType

from jira_fields.catalog.models import (
    AccessPath,
    EntityFieldCatalog,
    FieldDefinition,
    UsageStatistic,
)
from jira_fields.catalog.store import CatalogStore
from jira_fields.entity_types import EntityType, coerce_entity_type


class CatalogNotFoundError(LookupError):
    """Raised when no catalog exists for the requested entity type."""

    def __init__(self, entity_type: object, available: Iterable[str] = ()):
        self.entity_type = entity_type
        self.available = sorted(available)
        message = f"Unknown entity type: {entity_type!r}."
        if self.available:
            message += f" Supported types: {', '.join(self.available)}"
        super().__init__(message)


class FieldCatalog:
    """Read-only lookup of entity catalogs by entity type."""

    def __init__(self, catalogs: Iterable[EntityFieldCatalog]):
        by_type: dict[EntityType, EntityFieldCatalog] = {}
        for catalog in catalogs:
            if catalog.entity_type in by_type:
                raise ValueError(
                    f"Duplicate catalog for entity type '{catalog.entity_type.value}'"
                )
            by_type[catalog.entity_type] = catalog
        self._catalogs = MappingProxyType(by_type)

    @classmethod
    def from_directory(cls, root: str | Path | None = None) -> FieldCatalog:
        """Load every ``<entity>.yml`` under ``root`` (packaged data if None)."""
        return cls(CatalogStore(root).load())

    def lookup(self, entity_type: EntityType | str) -> EntityFieldCatalog:
        """Return the catalog for ``entity_type``.

        Raises:
            CatalogNotFoundError: the type is outside the enumeration or has
                no loaded catalog. This signals a caller bug and must not be
                swallowed.
        """
        key = coerce_entity_type(entity_type)
        if key is None or key not in self._catalogs:
            raise CatalogNotFoundError(entity_type, self.entity_types())
        return self._catalogs[key]

    def entity_types(self) -> list[str]:
        return [t.value for t in self._catalogs]

    def __contains__(self, entity_type: object) -> bool:
        key = coerce_entity_type(entity_type)  # type: ignore[arg-type]
        return key is not None and key in self._catalogs

    def __iter__(self) -> Iterator[EntityFieldCatalog]:
        return iter(self._catalogs.values())

    def __len__(self) -> int:  # pragma: no cover - trivial
        return len(self._catalogs)


__all__ = [
    "AccessPath",
    "CatalogNotFoundError",
    "CatalogStore",
    "EntityFieldCatalog",
    "FieldCatalog",
    "FieldDefinition",
    "UsageStatistic",
]
