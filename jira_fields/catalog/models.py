"""Pydantic models for per-entity field catalogs.

A catalog file describes one entity type and is produced ahead of time by
analysing historical field usage. Example (abridged ``issue.yml``)::

  entity_type: issue
  last_analyzed: 2024-06-01T12:00:00Z
  typo_corrections:
    summry: summary
    asignee: assignee
  usage_statistics:
    summary: {frequency: high, availability: 1.0}
    assignee: {frequency: high, availability: 0.82}
  contextual_suggestions: [summary, status, assignee]
  custom_field_patterns:
    customfield_10001: [string]
  definitions:
    status:
      name: Status
      description: Current issue status and its category information
      type: object
      access_paths:
        - path: status.name
          description: Status name
          type: string
          frequency: high

Models are frozen and mapping fields are exposed read-only once validated, so
a loaded catalog can be shared by every request without copying.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from types import MappingProxyType
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from jira_fields.entity_types import EntityType

Frequency = Literal["high", "medium", "low"]

FREQUENCY_RANK: dict[str, int] = {"high": 3, "medium": 2, "low": 1}


class UsageStatistic(BaseModel):
    """How often a field is requested and how often records carry it."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    frequency: Frequency = "medium"
    availability: float = Field(0.5, ge=0.0, le=1.0)


class AccessPath(BaseModel):
    """One documented dotted route into a field."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: str
    description: str = ""
    type: str = "string"
    frequency: Frequency = "medium"


class FieldDefinition(BaseModel):
    """A top-level Jira field and the nested paths reachable through it."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str
    name: str = ""
    description: str = ""
    type: Literal["object", "string", "array", "number", "boolean"] = "object"
    access_paths: tuple[AccessPath, ...] = ()
    examples: tuple[str, ...] = ()


class EntityFieldCatalog(BaseModel):
    """Static field metadata for a single entity type."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    entity_type: EntityType
    last_analyzed: datetime
    typo_corrections: Mapping[str, str] = Field(default_factory=dict)
    usage_statistics: Mapping[str, UsageStatistic] = Field(default_factory=dict)
    contextual_suggestions: tuple[str, ...] = ()
    custom_field_patterns: Mapping[str, frozenset[str]] = Field(default_factory=dict)
    definitions: Mapping[str, FieldDefinition] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _inject_field_ids(cls, data):  # type: ignore[no-untyped-def]
        # Field ids are the mapping keys in YAML; copy them onto each definition.
        if isinstance(data, dict) and isinstance(data.get("definitions"), dict):
            definitions = {}
            for key, value in data["definitions"].items():
                if isinstance(value, dict) and "id" not in value:
                    value = {**value, "id": key}
                definitions[key] = value
            data = {**data, "definitions": definitions}
        return data

    @field_validator("typo_corrections")
    @classmethod
    def _normalise_typos(cls, v: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType({k.strip().lower(): t for k, t in v.items()})

    @field_validator("usage_statistics", "custom_field_patterns", "definitions")
    @classmethod
    def _freeze_mapping(cls, v: Mapping) -> Mapping:  # type: ignore[type-arg]
        return MappingProxyType(dict(v))

    # Derived views --------------------------------------------------------
    def known_fields(self) -> list[str]:
        """Return every field name the catalog knows about, in catalog order.

        Order: usage statistics, contextual suggestions, typo targets, then
        documented access paths. Duplicates are dropped.
        """
        seen: dict[str, None] = {}
        for name in self.usage_statistics:
            seen.setdefault(name)
        for name in self.contextual_suggestions:
            seen.setdefault(name)
        for name in self.typo_corrections.values():
            seen.setdefault(name)
        for name in self.path_index():
            seen.setdefault(name)
        return list(seen)

    def path_index(self) -> dict[str, str]:
        """Map each documented access path to the id of its field."""
        index: dict[str, str] = {}
        for field_id, definition in self.definitions.items():
            for access in definition.access_paths:
                index[access.path] = field_id
        return index

    def access_path(self, path: str) -> AccessPath | None:
        field_id = self.path_index().get(path)
        if field_id is None:
            return None
        for access in self.definitions[field_id].access_paths:
            if access.path == path:
                return access
        return None  # pragma: no cover - index and definitions agree

    def statistic(self, field: str) -> UsageStatistic | None:
        return self.usage_statistics.get(field)

    def frequency_rank(self, field: str) -> int:
        """Numeric frequency class for ordering; unknown fields rank as low."""
        stat = self.usage_statistics.get(field)
        if stat is not None:
            return FREQUENCY_RANK[stat.frequency]
        access = self.access_path(field)
        if access is not None:
            return FREQUENCY_RANK[access.frequency]
        return FREQUENCY_RANK["low"]

    def summary(self) -> dict:
        """JSON-friendly overview used by the describe tool and CLI."""
        return {
            "entity_type": self.entity_type.value,
            "last_analyzed": self.last_analyzed.isoformat(),
            "field_count": len(self.definitions),
            "fields": {
                field_id: {
                    "name": definition.name,
                    "description": definition.description,
                    "type": definition.type,
                    "access_paths": [a.path for a in definition.access_paths],
                }
                for field_id, definition in self.definitions.items()
            },
            "contextual_suggestions": list(self.contextual_suggestions),
            "usage_statistics": {
                name: stat.model_dump() for name, stat in self.usage_statistics.items()
            },
            "custom_field_patterns": {
                name: sorted(tags) for name, tags in self.custom_field_patterns.items()
            },
        }


__all__ = [
    "AccessPath",
    "EntityFieldCatalog",
    "FieldDefinition",
    "FREQUENCY_RANK",
    "Frequency",
    "UsageStatistic",
]
