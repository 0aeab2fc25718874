import pytest

from jira_fields.field_path import FieldPath, is_bracket_path, parse_field_path


def test_simple_path_segments():
    path = parse_field_path("status.statusCategory.key")
    assert path.supported
    assert path.segments == ("status", "statusCategory", "key")
    assert path.depth == 3
    assert path.leaf == "key"


def test_single_segment():
    path = parse_field_path("summary")
    assert path == FieldPath(raw="summary", segments=("summary",))


@pytest.mark.parametrize(
    "raw", ["components[].name", "labels[*]", "components[0].name", "fixVersions]"]
)
def test_bracket_paths_are_unsupported(raw):
    assert is_bracket_path(raw)
    path = parse_field_path(raw)
    assert not path.supported
    assert path.segments == ()
    assert path.raw == raw


def test_empty_segments_are_kept():
    # "a..b" keeps an empty key segment; it simply never resolves
    assert parse_field_path("a..b").segments == ("a", "", "b")


def test_field_path_is_immutable():
    path = parse_field_path("status.name")
    with pytest.raises(AttributeError):
        path.raw = "other"  # type: ignore[misc]
