import asyncio

import pytest
from fastmcp.exceptions import ToolError

from jira_fields.tools import Tools
from jira_fields.tools.base import CatalogTool


def invoke(method, *args, **kwargs):
    return asyncio.run(method(*args, **kwargs))


class TestProjectTool:
    def test_projects_and_reports_missing(self, tools, issue_record):
        result = invoke(
            tools.project_tool.project_fields,
            issue_record,
            ["status.name", "summry", "labels[0]"],
        )
        assert result["record"] == {"status": {"name": "In Progress"}}
        assert result["missing"] == ["summry", "labels[0]"]
        assert result["suggestions"]["summry"]["corrected"] == "summary"

    def test_absent_valid_field_gets_alternatives(self, tools):
        result = invoke(
            tools.project_tool.project_fields, {"key": "PROJ-2"}, ["key", "summary"]
        )
        assert result["record"] == {"key": "PROJ-2"}
        assert result["missing"] == ["summary"]
        hint = result["suggestions"]["summary"]
        assert hint["corrected"] is None
        assert hint["alternatives"][0] == "status"

    def test_without_fields_returns_record(self, tools, issue_record):
        result = invoke(tools.project_tool.project_fields, issue_record)
        assert result["record"] == issue_record
        assert result["missing"] == []
        assert result["suggestions"] == {}

    def test_flat_mode(self, tools, issue_record):
        result = invoke(
            tools.project_tool.project_fields,
            issue_record,
            ["assignee.displayName"],
            respect_nesting=False,
        )
        assert result["record"] == {"assignee.displayName": "Ada Lovelace"}

    def test_unknown_entity_type_is_tool_error(self, tools, issue_record):
        with pytest.raises(ToolError, match="Unknown entity type"):
            invoke(
                tools.project_tool.project_fields,
                issue_record,
                ["key"],
                entity_type="board",
            )


class TestSuggestTool:
    def test_typo_correction(self, tools):
        result = invoke(tools.suggest_tool.suggest_fields, "issue", "stauts")
        assert result["entity_type"] == "issue"
        assert result["field"] == "stauts"
        assert result["corrected"] == "status"
        assert "status" not in result["alternatives"]
        assert "ranked" not in result

    def test_with_scores(self, tools):
        result = invoke(
            tools.suggest_tool.suggest_fields, "user", "emial", with_scores=True
        )
        assert result["corrected"] == "emailAddress"
        assert result["ranked"][0]["field"] == "emailAddress"
        assert result["ranked"][0]["is_typo_correction"] is True

    def test_unknown_entity_type(self, tools):
        with pytest.raises(ToolError):
            invoke(tools.suggest_tool.suggest_fields, "board", "name")


class TestValidateTool:
    def test_accepts_space_delimited_string(self, tools):
        result = invoke(
            tools.validate_tool.validate_fields,
            "issue",
            "status.name  assignee.nmae",
        )
        assert result["valid_paths"] == ["status.name"]
        assert result["invalid_paths"] == ["assignee.nmae"]
        assert result["is_valid"] is False
        assert result["warning"].startswith("WARNING: Some fields were invalid")
        assert result["entity_type"] == "issue"

    def test_accepts_list(self, tools):
        result = invoke(
            tools.validate_tool.validate_fields, "agile", ["board.name", "sprint.state"]
        )
        assert result["is_valid"] is True
        assert result["warning"] == ""


class TestDescribeTool:
    def test_describe(self, tools):
        result = invoke(tools.describe_tool.describe_fields, "project")
        assert result["entity_type"] == "project"
        assert result["field_count"] > 0

    def test_unknown(self, tools):
        with pytest.raises(ToolError):
            invoke(tools.describe_tool.describe_fields, "sprint")


class _RecordingMCP:
    def __init__(self):
        self.registered = {}

    def tool(self, description=""):
        def decorator(fn):
            self.registered[fn.__name__] = description
            return fn

        return decorator


def test_register_discovers_decorated_methods(tools):
    mcp = _RecordingMCP()
    tools.register(mcp)
    assert set(mcp.registered) == {
        "project_fields",
        "suggest_fields",
        "validate_fields",
        "describe_fields",
    }
    assert all(mcp.registered.values())


def test_tools_load_from_catalog_root(sample_catalog_dir):
    tools = Tools(catalog_root=sample_catalog_dir)
    assert tools.catalog.entity_types() == ["issue"]


def test_catalog_tool_requires_catalog():
    class Dummy(CatalogTool):
        tool_name = "dummy"

    with pytest.raises(ValueError):
        Dummy(None)
