"""Shared pytest fixtures for Jira Fields tests."""

import copy
from pathlib import Path

import pytest

from jira_fields.catalog import FieldCatalog
from jira_fields.suggestions import SuggestionEngine
from jira_fields.tools import Tools

SAMPLE_ISSUE_CATALOG = """\
entity_type: issue
last_analyzed: 2024-01-01T00:00:00Z
typo_corrections:
  stauts: status
  Asignee: assignee
usage_statistics:
  status: {frequency: high, availability: 1.0}
  stats: {frequency: medium, availability: 0.5}
  state: {frequency: low, availability: 0.9}
  assignee: {frequency: high, availability: 0.8}
contextual_suggestions: [assignee, state, stats, status]
custom_field_patterns:
  customfield_10001: [string]
definitions:
  assignee:
    name: Assignee
    type: object
    access_paths:
      - {path: assignee.displayName, type: string, frequency: high}
      - {path: assignee.emailAddress, type: string, frequency: medium}
"""

ISSUE_RECORD = {
    "id": "10001",
    "key": "PROJ-1",
    "self": "https://jira.example.com/rest/api/2/issue/10001",
    "summary": "Login page times out",
    "description": None,
    "status": {
        "id": "3",
        "name": "In Progress",
        "statusCategory": {"id": 4, "key": "indeterminate", "name": "In Progress"},
    },
    "assignee": {
        "displayName": "Ada Lovelace",
        "emailAddress": "ada@example.com",
        "active": True,
    },
    "labels": ["backend", "auth"],
    "components": [{"id": "1", "name": "API"}, {"id": "2", "name": "Web"}],
}


@pytest.fixture(scope="session")
def field_catalog():
    """Packaged catalogs for every entity type."""
    return FieldCatalog.from_directory()


@pytest.fixture
def sample_catalog_dir(tmp_path) -> Path:
    """Temporary catalog directory holding a small, fully controlled issue catalog."""
    catalog_dir = tmp_path / "catalogs"
    catalog_dir.mkdir()
    (catalog_dir / "issue.yml").write_text(SAMPLE_ISSUE_CATALOG, encoding="utf-8")
    return catalog_dir


@pytest.fixture
def sample_catalog(sample_catalog_dir):
    return FieldCatalog.from_directory(sample_catalog_dir)


@pytest.fixture
def sample_engine(sample_catalog):
    return SuggestionEngine(sample_catalog)


@pytest.fixture
def engine(field_catalog):
    return SuggestionEngine(field_catalog)


@pytest.fixture
def tools(field_catalog):
    return Tools(catalog=field_catalog)


@pytest.fixture
def issue_record():
    """A fresh copy of a realistic issue record per test."""
    return copy.deepcopy(ISSUE_RECORD)
