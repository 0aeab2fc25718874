"""Catalog overview tool."""

from __future__ import annotations

from typing import Any

from fastmcp import Context

from jira_fields.decorators.mcp import mcp_tool
from jira_fields.tools.base import CatalogTool


class DescribeTool(CatalogTool):
    """Expose the static field catalog of an entity type."""

    @property
    def tool_name(self) -> str:  # pragma: no cover - trivial
        return "describe_fields"

    @mcp_tool(
        description=(
            "Describe the known fields of a Jira entity type (issue | project | user | agile | system): "
            "field definitions with their dot-notation access paths, the most commonly used fields "
            "in order, usage statistics and observed custom field value types. "
            "Use this to discover valid 'fields' values for project_fields."
        )
    )
    async def describe_fields(
        self,
        entity_type: str,
        ctx: Context | None = None,
    ) -> dict[str, Any]:
        return self._lookup(entity_type).summary()
