"""Pre-flight validation of requested field paths.

Checks each path against the documented access paths of an entity catalog so
handlers can drop unknown paths before calling Jira and tell the caller what
they probably meant. Custom fields (``customfield_<digits>``) are accepted
without a catalog entry since their ids differ per Jira instance.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from pydantic import BaseModel, Field

from jira_fields.catalog import EntityFieldCatalog, FieldCatalog
from jira_fields.entity_types import EntityType
from jira_fields.suggestions import SuggestionEngine

CUSTOM_FIELD_PATTERN = re.compile(r"^customfield_\d+$")
PATH_SUGGESTION_CUTOFF = 0.6
MAX_PATH_SUGGESTIONS = 3


class PathInfo(BaseModel):
    field_id: str
    type: str
    description: str


class FieldValidationResult(BaseModel):
    """Outcome of validating a batch of field paths for one entity type."""

    entity_type: EntityType
    valid_paths: list[str] = Field(default_factory=list)
    invalid_paths: list[str] = Field(default_factory=list)
    path_info: dict[str, PathInfo] = Field(default_factory=dict)
    suggestions: dict[str, list[str]] = Field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.invalid_paths


def is_custom_field(path: str) -> bool:
    return bool(CUSTOM_FIELD_PATTERN.match(path))


def _similar_paths(path: str, entity: EntityFieldCatalog) -> list[str]:
    scored = [
        (candidate, SuggestionEngine.similarity(path, candidate))
        for candidate in entity.path_index()
    ]
    scored = [item for item in scored if item[1] >= PATH_SUGGESTION_CUTOFF]
    scored.sort(key=lambda item: (-item[1], item[0]))
    return [candidate for candidate, _ in scored[:MAX_PATH_SUGGESTIONS]]


def validate_field_paths(
    catalog: FieldCatalog,
    entity_type: EntityType | str,
    paths: Iterable[str],
) -> FieldValidationResult:
    """Split ``paths`` into valid and invalid, with suggestions for the latter.

    Raises:
        CatalogNotFoundError: ``entity_type`` has no catalog.
    """
    entity = catalog.lookup(entity_type)
    index = entity.path_index()
    result = FieldValidationResult(entity_type=entity.entity_type)

    for path in paths:
        if path in index:
            result.valid_paths.append(path)
            access = entity.access_path(path)
            if access is not None:
                result.path_info[path] = PathInfo(
                    field_id=index[path],
                    type=access.type,
                    description=access.description,
                )
        elif is_custom_field(path):
            result.valid_paths.append(path)
        else:
            result.invalid_paths.append(path)
            similar = _similar_paths(path, entity)
            if similar:
                result.suggestions[path] = similar
    return result


def format_field_suggestions(suggestions: dict[str, list[str]]) -> str:
    if not suggestions:
        return ""
    lines = [
        f'Suggestions for "{field}": {", ".join(candidates)}'
        for field, candidates in suggestions.items()
    ]
    return "\n" + "\n".join(lines)


def format_field_warning(result: FieldValidationResult) -> str:
    """Render the warning attached to responses when fields were dropped."""
    if result.is_valid:
        return ""
    message = (
        "WARNING: Some fields were invalid and filtered out.\n"
        f"Invalid fields: {', '.join(result.invalid_paths)}"
    )
    return message + format_field_suggestions(result.suggestions)


__all__ = [
    "FieldValidationResult",
    "PathInfo",
    "format_field_suggestions",
    "format_field_warning",
    "is_custom_field",
    "validate_field_paths",
]
