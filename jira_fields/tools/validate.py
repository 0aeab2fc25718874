"""
Validation tool for requested field paths.

Checks paths against the documented access paths of an entity type before a
Jira call is made, returning valid/invalid splits, per-path metadata and
suggestions. Custom fields (customfield_<digits>) are always accepted.
"""

from __future__ import annotations

from typing import Any

from fastmcp import Context

from jira_fields.decorators.mcp import mcp_tool
from jira_fields.tools.base import CatalogTool
from jira_fields.validation import format_field_warning, validate_field_paths


class ValidateTool(CatalogTool):
    """Tool for batch validation of field paths."""

    @property
    def tool_name(self) -> str:  # pragma: no cover - trivial
        return "validate_fields"

    @mcp_tool(
        description=(
            "Validate dot-notation field paths for a Jira entity type before requesting them. "
            "Accepts a space-delimited string or list of paths. "
            "Returns is_valid, valid_paths, invalid_paths, path_info (field id, type, description) "
            "and suggestions for invalid paths, plus a ready-to-show warning message."
        )
    )
    async def validate_fields(
        self,
        entity_type: str,
        fields: str | list[str],
        ctx: Context | None = None,
    ) -> dict[str, Any]:
        entity = self._lookup(entity_type)
        paths = fields.split() if isinstance(fields, str) else fields
        result = validate_field_paths(self.catalog, entity.entity_type, paths)
        payload = result.model_dump(mode="json")
        payload["is_valid"] = result.is_valid
        payload["warning"] = format_field_warning(result)
        return payload
