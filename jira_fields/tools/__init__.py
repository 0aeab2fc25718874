import logging
from pathlib import Path

from fastmcp import FastMCP

from jira_fields.catalog import FieldCatalog
from jira_fields.suggestions import SuggestionEngine
from jira_fields.tools.describe import DescribeTool
from jira_fields.tools.project import ProjectTool
from jira_fields.tools.suggest import SuggestTool
from jira_fields.tools.validate import ValidateTool

logger = logging.getLogger(__name__)


class Tools:
    """Main Tools class that delegates to individual tool implementations."""

    def __init__(
        self,
        catalog_root: str | Path | None = None,
        catalog: FieldCatalog | None = None,
    ):
        """Initialize the Jira field tools provider.

        Args:
            catalog_root: Optional directory holding ``<entity>.yml`` catalogs.
                         If None, uses the packaged resources directory.
            catalog: Pre-built catalog; takes precedence over ``catalog_root``.
        """
        # One immutable catalog and engine shared by every tool
        self.catalog = catalog or FieldCatalog.from_directory(catalog_root)
        self.engine = SuggestionEngine(self.catalog)
        logger.debug("Loaded field catalogs for %s", self.catalog.entity_types())

        self.project_tool = ProjectTool(self.catalog, self.engine)
        self.suggest_tool = SuggestTool(self.catalog, self.engine)
        self.validate_tool = ValidateTool(self.catalog)
        self.describe_tool = DescribeTool(self.catalog)

    @property
    def name(self) -> str:
        """Provider name for logging and identification."""
        return "tools"

    @property
    def instances(self) -> list:
        return [
            self.project_tool,
            self.suggest_tool,
            self.validate_tool,
            self.describe_tool,
        ]

    def register(self, mcp: FastMCP):
        """Register all field tools with the MCP server.

        Discovers methods on tool instances that have been marked with the
        ``_mcp_tool`` attribute (set by the ``mcp_tool`` decorator) and
        registers each with FastMCP, passing through the stored description.
        """
        for tool in self.instances:
            for attr_name in dir(tool):
                if attr_name.startswith("_"):
                    continue  # skip dunder/private helpers
                attr = getattr(tool, attr_name)
                if callable(attr) and getattr(attr, "_mcp_tool", False):
                    description = getattr(attr, "_mcp_description", "")
                    mcp.tool(description=description)(attr)
