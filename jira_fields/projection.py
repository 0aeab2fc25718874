"""Client-side field projection for Jira records.

Jira REST endpoints return far more data than a tool caller usually needs.
The projector takes an already-fetched record and a list of dotted field
paths and builds a new record holding only the requested values, nested the
same way the paths are::

    >>> project(
    ...     {"status": {"name": "In Progress"}, "id": "1"},
    ...     ["status.name"],
    ... )
    {'status': {'name': 'In Progress'}}

Projection is lenient: a path that is malformed, uses bracket notation or
simply does not exist in the record is left out of the result. It never
raises for data-shape problems. Callers that need to know which paths were
dropped use :meth:`Projector.project_with_report`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from jira_fields.entity_types import EntityType
from jira_fields.field_path import FieldPath, parse_field_path

logger = logging.getLogger(__name__)

# JSON-shaped value: dict | list | str | int | float | bool | None
JsonValue = Any


class _Missing:
    """Sentinel for "no value" (distinct from a JSON ``null``)."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return "<missing>"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


class ProjectionOptions(BaseModel):
    """Behaviour switches for a projection call."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    entity_type: EntityType = Field(
        EntityType.issue,
        description="Entity category of the record (diagnostics only).",
    )
    respect_nesting: bool = Field(
        True,
        description="Rebuild nested objects; when false keys are literal paths.",
    )
    log_filtering: bool = Field(
        False, description="Log each projection call at INFO level."
    )


DEFAULT_OPTIONS = ProjectionOptions()


def resolve(record: JsonValue, path: FieldPath) -> JsonValue:
    """Walk ``path`` through ``record`` and return the value or ``MISSING``.

    Only dicts are traversed; reaching a list, scalar or ``None`` before the
    last segment ends the walk.
    """
    if not path.supported or not path.depth:
        return MISSING
    current = record
    for segment in path.segments:
        if not isinstance(current, dict) or segment not in current:
            return MISSING
        current = current[segment]
    return current


def _merge(
    target: dict[str, JsonValue],
    path: FieldPath,
    value: JsonValue,
    scaffolds: set[int],
) -> None:
    """Place ``value`` at ``path`` inside ``target``, creating fresh dicts.

    ``scaffolds`` holds the ids of dicts built by the projector. A dict found
    on the way that is not one of them is a leaf value shared with the source
    record; it is replaced by a shallow copy so the source is never written.
    Non-dict values in the way are overwritten.
    """
    node = target
    for segment in path.segments[:-1]:
        child = node.get(segment)
        if not isinstance(child, dict):
            child = {}
        elif id(child) not in scaffolds:
            child = dict(child)
        else:
            node = child
            continue
        scaffolds.add(id(child))
        node[segment] = child
        node = child
    node[path.leaf] = value


class Projector:
    """Field projector bound to a default set of options.

    Instances hold no mutable state and are safe to share between concurrent
    requests.
    """

    def __init__(self, options: ProjectionOptions | None = None):
        self.options = options or DEFAULT_OPTIONS

    def project(
        self,
        record: JsonValue,
        requested_paths: Iterable[str] | None,
        options: ProjectionOptions | None = None,
    ) -> JsonValue:
        """Return ``record`` reduced to ``requested_paths``.

        An empty or missing path list, or a record that is not a dict, is
        returned as-is (the very same object, not a copy).
        """
        projected, _ = self._project(record, requested_paths, options)
        return projected

    def project_with_report(
        self,
        record: JsonValue,
        requested_paths: Iterable[str] | None,
        options: ProjectionOptions | None = None,
    ) -> tuple[JsonValue, list[str]]:
        """Project ``record`` and also return the paths that did not resolve.

        Unsupported (bracket) paths are reported as missing as well. When no
        projection happens the missing list is empty.
        """
        return self._project(record, requested_paths, options)

    def _project(
        self,
        record: JsonValue,
        requested_paths: Iterable[str] | None,
        options: ProjectionOptions | None,
    ) -> tuple[JsonValue, list[str]]:
        opts = options or self.options
        paths = list(requested_paths) if requested_paths is not None else []
        if not paths or not isinstance(record, dict):
            return record, []

        if opts.log_filtering:
            logger.info(
                "Client-side filtering applied for %s: %s",
                opts.entity_type.value,
                paths,
            )

        result: dict[str, JsonValue] = {}
        scaffolds = {id(result)}
        missing: list[str] = []
        for raw in paths:
            path = parse_field_path(raw)
            value = resolve(record, path)
            if value is MISSING:
                missing.append(raw)
                continue
            if opts.respect_nesting:
                _merge(result, path, value, scaffolds)
            else:
                result[raw] = value

        if missing and opts.log_filtering:
            logger.debug(
                "Unresolved %s fields: %s", opts.entity_type.value, missing
            )
        return result, missing


_default_projector = Projector()


def project(
    record: JsonValue,
    requested_paths: Iterable[str] | None = None,
    options: ProjectionOptions | None = None,
) -> JsonValue:
    """Module-level convenience wrapper around :meth:`Projector.project`."""
    return _default_projector.project(record, requested_paths, options)


__all__ = [
    "DEFAULT_OPTIONS",
    "MISSING",
    "ProjectionOptions",
    "Projector",
    "project",
    "resolve",
]
