"""Base tool functionality for the Jira field tools.

This module contains common functionality shared across all tool implementations.
"""

import logging
from abc import ABC, abstractmethod

from fastmcp.exceptions import ToolError

from jira_fields.catalog import CatalogNotFoundError, EntityFieldCatalog, FieldCatalog
from jira_fields.entity_types import EntityType

logger = logging.getLogger(__name__)


class Tool(ABC):
    """Minimal base class for all MCP tools."""

    def __init__(self):
        self.logger = logger

    @property
    @abstractmethod
    def tool_name(self) -> str:
        """Return the name of this tool - must be implemented by subclasses."""
        pass


class CatalogTool(Tool):
    """Base class for tools that read the field catalog."""

    def __init__(self, catalog: FieldCatalog | None = None):
        super().__init__()
        if catalog is None:
            raise ValueError("CatalogTool requires a catalog instance - received None")
        self.catalog = catalog

    def _lookup(self, entity_type: EntityType | str) -> EntityFieldCatalog:
        """Resolve an entity catalog, surfacing unknown types as tool errors."""
        try:
            return self.catalog.lookup(entity_type)
        except CatalogNotFoundError as exc:
            self.logger.warning("%s called with %s", self.tool_name, exc)
            raise ToolError(str(exc)) from exc
