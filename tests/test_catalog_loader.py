import pytest
from pydantic import ValidationError

from jira_fields.catalog import CatalogNotFoundError, CatalogStore, FieldCatalog
from jira_fields.catalog.store import packaged_catalog_root
from jira_fields.entity_types import EntityType, coerce_entity_type


class TestPackagedCatalogs:
    def test_every_entity_type_has_a_catalog(self, field_catalog):
        assert sorted(field_catalog.entity_types()) == sorted(EntityType.values())
        assert len(field_catalog) == len(EntityType)

    def test_packaged_root_exists(self):
        assert packaged_catalog_root().is_dir()

    @pytest.mark.parametrize("key", ["issue", "ISSUE", " issue ", EntityType.issue])
    def test_lookup_accepts_strings_and_enum(self, field_catalog, key):
        assert field_catalog.lookup(key).entity_type is EntityType.issue

    def test_unknown_entity_type_raises(self, field_catalog):
        with pytest.raises(CatalogNotFoundError) as excinfo:
            field_catalog.lookup("board")
        assert "Unknown entity type: 'board'" in str(excinfo.value)
        assert "Supported types:" in str(excinfo.value)
        assert excinfo.value.available == sorted(EntityType.values())
        assert isinstance(excinfo.value, LookupError)

    def test_contains(self, field_catalog):
        assert "agile" in field_catalog
        assert "sprint" not in field_catalog

    def test_issue_catalog_content(self, field_catalog):
        issue = field_catalog.lookup("issue")
        assert issue.typo_corrections["summry"] == "summary"
        assert issue.contextual_suggestions[:3] == ("summary", "status", "assignee")
        assert issue.usage_statistics["summary"].frequency == "high"
        assert issue.path_index()["status.name"] == "status"
        assert issue.definitions["status"].id == "status"
        assert issue.access_path("assignee.displayName").type == "string"
        assert issue.access_path("assignee.nope") is None

    def test_documented_paths_have_no_brackets(self, field_catalog):
        for entity in field_catalog:
            for path in entity.path_index():
                assert "[" not in path and "]" not in path, path

    def test_typo_targets_are_known_fields(self, field_catalog):
        for entity in field_catalog:
            known = set(entity.usage_statistics) | set(entity.definitions)
            for typo, target in entity.typo_corrections.items():
                assert target in known, (entity.entity_type, typo, target)

    def test_summary_shape(self, field_catalog):
        summary = field_catalog.lookup("user").summary()
        assert summary["entity_type"] == "user"
        assert summary["field_count"] == len(summary["fields"])
        assert "displayName" in summary["fields"]
        assert summary["contextual_suggestions"][0] == "displayName"


class TestImmutability:
    def test_catalog_model_is_frozen(self, field_catalog):
        issue = field_catalog.lookup("issue")
        with pytest.raises(ValidationError):
            issue.contextual_suggestions = ()  # type: ignore[misc]

    def test_mappings_are_read_only(self, field_catalog):
        issue = field_catalog.lookup("issue")
        with pytest.raises(TypeError):
            issue.typo_corrections["new"] = "summary"  # type: ignore[index]
        with pytest.raises(TypeError):
            issue.usage_statistics["new"] = None  # type: ignore[index]


class TestCatalogDirectory:
    def test_typo_keys_are_normalised(self, sample_catalog):
        assert sample_catalog.lookup("issue").typo_corrections["asignee"] == "assignee"

    def test_only_present_types_load(self, sample_catalog):
        assert sample_catalog.entity_types() == ["issue"]
        with pytest.raises(CatalogNotFoundError):
            sample_catalog.lookup("user")

    def test_files_without_entity_type_are_skipped(self, sample_catalog_dir):
        (sample_catalog_dir / "notes.yaml").write_text("title: scratch\n", encoding="utf-8")
        (sample_catalog_dir / "empty.yml").write_text("", encoding="utf-8")
        assert len(CatalogStore(sample_catalog_dir).load()) == 1

    def test_invalid_catalog_raises(self, tmp_path):
        (tmp_path / "issue.yml").write_text(
            "entity_type: issue\n"
            "last_analyzed: 2024-01-01T00:00:00Z\n"
            "usage_statistics:\n"
            "  summary: {frequency: sometimes}\n",
            encoding="utf-8",
        )
        with pytest.raises(ValidationError):
            FieldCatalog.from_directory(tmp_path)

    def test_unknown_entity_in_file_raises(self, tmp_path):
        (tmp_path / "board.yml").write_text(
            "entity_type: board\nlast_analyzed: 2024-01-01T00:00:00Z\n",
            encoding="utf-8",
        )
        with pytest.raises(ValidationError):
            FieldCatalog.from_directory(tmp_path)

    def test_duplicate_entity_type_raises(self, sample_catalog_dir):
        text = (sample_catalog_dir / "issue.yml").read_text(encoding="utf-8")
        (sample_catalog_dir / "issue_copy.yml").write_text(text, encoding="utf-8")
        with pytest.raises(ValueError, match="Duplicate catalog"):
            FieldCatalog.from_directory(sample_catalog_dir)

    def test_missing_root_raises(self, tmp_path):
        with pytest.raises(ValueError, match="not a directory"):
            CatalogStore(tmp_path / "absent")


@pytest.mark.parametrize(
    "value,expected",
    [("issue", EntityType.issue), ("Agile", EntityType.agile), ("nope", None)],
)
def test_coerce_entity_type(value, expected):
    assert coerce_entity_type(value) is expected
