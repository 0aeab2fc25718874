import pytest

from jira_fields.server import Server


@pytest.fixture(scope="module")
def server():
    return Server()


def test_server_loads_catalogs(server):
    assert len(server.tools.catalog) == 5
    assert server.mcp.name == "jira-fields"


def test_uptime_is_non_negative(server):
    assert server.uptime_seconds() >= 0.0


def test_unsupported_transport(server):
    with pytest.raises(ValueError, match="Unsupported transport"):
        server.run(transport="carrier-pigeon")  # type: ignore[arg-type]


def test_custom_catalog_root(sample_catalog_dir):
    server = Server(catalog_root=sample_catalog_dir)
    assert server.tools.catalog.entity_types() == ["issue"]
