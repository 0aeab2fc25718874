import importlib.metadata

# ---------------------------------------------------------------------------
# Version metadata
# ---------------------------------------------------------------------------
# During test collection (editable / in-tree execution) the distribution
# metadata may not yet be built. All failures are normalised to a neutral
# "0.0.0" placeholder so tests do not error during collection.
try:  # pragma: no cover - trivial guard
    try:
        __version__ = importlib.metadata.version("jira-fields")
    except KeyError:  # metadata object exists but lacks 'Version' key
        __version__ = "0.0.0"
except importlib.metadata.PackageNotFoundError:  # distribution not installed
    __version__ = "0.0.0"

from jira_fields.catalog import CatalogNotFoundError, EntityFieldCatalog, FieldCatalog
from jira_fields.entity_types import EntityType
from jira_fields.field_path import FieldPath, parse_field_path
from jira_fields.projection import ProjectionOptions, Projector, project
from jira_fields.suggestions import Suggestion, SuggestionEngine
from jira_fields.validation import validate_field_paths

__all__ = [
    "__version__",
    "CatalogNotFoundError",
    "EntityFieldCatalog",
    "EntityType",
    "FieldCatalog",
    "FieldPath",
    "ProjectionOptions",
    "Projector",
    "Suggestion",
    "SuggestionEngine",
    "parse_field_path",
    "project",
    "validate_field_paths",
]
