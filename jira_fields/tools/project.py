"""
Projection tool.

Reduces an already-fetched Jira record to the requested dotted field paths and
reports which of them could not be resolved, each with "did you mean" hints
from the entity's field catalog. Unresolved fields are a normal outcome, not
an error; only an unknown entity type fails the call.
"""

from __future__ import annotations

from typing import Any

from fastmcp import Context

from jira_fields.catalog import FieldCatalog
from jira_fields.decorators.mcp import mcp_tool
from jira_fields.projection import ProjectionOptions, Projector
from jira_fields.suggestions import SuggestionEngine
from jira_fields.tools.base import CatalogTool


class ProjectTool(CatalogTool):
    """Tool for client-side field projection of Jira records."""

    def __init__(
        self,
        catalog: FieldCatalog,
        engine: SuggestionEngine | None = None,
        projector: Projector | None = None,
    ):
        super().__init__(catalog)
        self.engine = engine or SuggestionEngine(catalog)
        self.projector = projector or Projector()

    @property
    def tool_name(self) -> str:  # pragma: no cover - trivial
        return "project_fields"

    @mcp_tool(
        description=(
            "Reduce a Jira record (issue, project, user, agile board/sprint, system info) "
            "to the requested fields. 'fields' is a list of dot-notation paths such as "
            "'status.name' or 'assignee.displayName'; nesting is preserved unless "
            "respect_nesting=false, in which case keys are the literal paths. "
            "Bracket/array paths like 'components[0].name' are not supported and are dropped. "
            "Omit 'fields' to get the record back unchanged. "
            "Returns {record, missing, suggestions}: 'missing' lists requested paths that did "
            "not resolve and 'suggestions' maps each of them to {corrected, alternatives}."
        )
    )
    async def project_fields(
        self,
        record: Any,
        fields: list[str] | None = None,
        entity_type: str = "issue",
        respect_nesting: bool = True,
        ctx: Context | None = None,
    ) -> dict[str, Any]:
        """Project ``record`` onto ``fields``.

        Args:
            record: Parsed JSON body of a Jira REST response.
            fields: Dot-notation field paths to keep.
            entity_type: issue | project | user | agile | system.
            respect_nesting: Rebuild nested objects (default) or use flat keys.

        Returns:
            Dictionary with the projected record, unresolved paths and hints.
        """
        entity = self._lookup(entity_type)
        options = ProjectionOptions(
            entity_type=entity.entity_type, respect_nesting=respect_nesting
        )
        projected, missing = self.projector.project_with_report(
            record, fields, options
        )

        suggestions = {}
        for path in missing:
            hint = self.engine.suggest(entity.entity_type, path)
            if hint.corrected or hint.alternatives:
                suggestions[path] = hint.model_dump()

        if missing:
            self.logger.debug(
                "%s: %d of %d requested %s fields unresolved",
                self.tool_name,
                len(missing),
                len(fields or []),
                entity.entity_type.value,
            )
        return {"record": projected, "missing": missing, "suggestions": suggestions}
