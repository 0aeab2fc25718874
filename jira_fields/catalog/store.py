"""YAML persistence for field catalogs (read-only at runtime).

Each entity type lives in its own file named after the entity
(``issue.yml``, ``project.yml`` ...). ``root=None`` resolves to the catalogs
packaged with :mod:`jira_fields`; any other value is used as a directory.
"""

from __future__ import annotations

import importlib.resources as ir
import logging
from pathlib import Path

import yaml

from jira_fields.catalog.models import EntityFieldCatalog

logger = logging.getLogger(__name__)

RESOURCES_DIRNAME = "resources"
CATALOGS_DIRNAME = "catalogs"


def packaged_catalog_root() -> Path:
    """Return the directory holding the catalogs shipped with the package."""
    files_obj = ir.files("jira_fields") / RESOURCES_DIRNAME / CATALOGS_DIRNAME
    return Path(str(files_obj))


def resolve_catalog_root(root: str | Path | None) -> Path:
    if root is None:
        return packaged_catalog_root()
    path = Path(root).expanduser().resolve()
    if not path.is_dir():
        raise ValueError(f"Catalog root is not a directory: {path}")
    return path


class CatalogStore:
    def __init__(self, root: str | Path | None = None):
        self.root = resolve_catalog_root(root)

    # Discovery ---------------------------------------------------------------
    def yaml_files(self) -> list[Path]:
        return sorted(list(self.root.glob("*.yml")) + list(self.root.glob("*.yaml")))

    # Load --------------------------------------------------------------------
    def load(self) -> list[EntityFieldCatalog]:
        """Parse and validate every catalog file below ``root``.

        Files without an ``entity_type`` key are skipped. Validation errors
        propagate so a broken catalog fails at startup, not mid-request.
        """
        catalogs: list[EntityFieldCatalog] = []
        for f in self.yaml_files():
            with open(f, encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
            if not isinstance(data, dict) or "entity_type" not in data:
                logger.debug("Skipping %s: no entity_type key", f.name)
                continue
            catalogs.append(EntityFieldCatalog.model_validate(data))
            logger.debug("Loaded %s field catalog from %s", data["entity_type"], f)
        return catalogs


__all__ = ["CatalogStore", "packaged_catalog_root", "resolve_catalog_root"]
