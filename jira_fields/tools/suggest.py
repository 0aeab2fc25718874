"""Field-name suggestion tool."""

from __future__ import annotations

from typing import Any

from fastmcp import Context

from jira_fields.catalog import FieldCatalog
from jira_fields.decorators.mcp import mcp_tool
from jira_fields.suggestions import DEFAULT_LIMIT, SuggestionEngine
from jira_fields.tools.base import CatalogTool


class SuggestTool(CatalogTool):
    """Tool answering "did you mean" questions about Jira field names."""

    def __init__(self, catalog: FieldCatalog, engine: SuggestionEngine | None = None):
        super().__init__(catalog)
        self.engine = engine or SuggestionEngine(catalog)

    @property
    def tool_name(self) -> str:  # pragma: no cover - trivial
        return "suggest_fields"

    @mcp_tool(
        description=(
            "Suggest Jira field names for a misspelled or unknown field. "
            "Input: entity_type (issue | project | user | agile | system) and the field name. "
            "Returns 'corrected' when the name is a known misspelling and up to 'limit' "
            "'alternatives' ordered by how often callers use them. "
            "Set with_scores=true to also receive scored candidates with similarity, "
            "frequency and availability factors."
        )
    )
    async def suggest_fields(
        self,
        entity_type: str,
        field: str,
        limit: int = DEFAULT_LIMIT,
        with_scores: bool = False,
        ctx: Context | None = None,
    ) -> dict[str, Any]:
        entity = self._lookup(entity_type)
        suggestion = self.engine.suggest(entity.entity_type, field, limit=limit)
        result: dict[str, Any] = {
            "entity_type": entity.entity_type.value,
            "field": field,
            **suggestion.model_dump(),
        }
        if with_scores:
            result["ranked"] = [
                s.model_dump()
                for s in self.engine.rank(
                    entity.entity_type, field, max_suggestions=max(limit, 1)
                )
            ]
        return result
