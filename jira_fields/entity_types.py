"""Entity types served by the Jira tools.

Every record handed to the projector belongs to one of these categories and
each category owns exactly one field catalog.
"""

from __future__ import annotations

from enum import Enum


class EntityType(str, Enum):
    """Runtime enum for the fixed set of Jira entity categories."""

    issue = "issue"
    project = "project"
    user = "user"
    agile = "agile"  # boards and sprints
    system = "system"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]


def coerce_entity_type(value: EntityType | str) -> EntityType | None:
    """Return the matching ``EntityType`` or ``None`` for unknown values."""
    if isinstance(value, EntityType):
        return value
    try:
        return EntityType(str(value).strip().lower())
    except ValueError:
        return None


__all__ = ["EntityType", "coerce_entity_type"]
