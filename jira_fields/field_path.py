"""Dotted field-path parsing.

A field path such as ``status.statusCategory.key`` addresses a (possibly
nested) value inside a Jira record. Paths are split on ``.`` into ordered
segments. Bracket notation (``components[].name``, ``labels[*]``,
``components[0].name``) is not supported: any path containing ``[`` or ``]``
is classified as unsupported as a whole and never resolves, even when the
prefix before the bracket would.
"""

from __future__ import annotations

from dataclasses import dataclass

PATH_SEPARATOR = "."
BRACKET_MARKERS = ("[", "]")


@dataclass(frozen=True)
class FieldPath:
    """Parsed representation of a requested field path."""

    raw: str
    segments: tuple[str, ...]
    supported: bool = True

    @property
    def depth(self) -> int:
        return len(self.segments)

    @property
    def leaf(self) -> str:
        return self.segments[-1] if self.segments else ""

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.raw


def is_bracket_path(path: str) -> bool:
    """Return ``True`` when ``path`` uses array/bracket notation anywhere."""
    return any(marker in path for marker in BRACKET_MARKERS)


def parse_field_path(path: str) -> FieldPath:
    """Parse ``path`` into segments, flagging bracket notation as unsupported.

    Unsupported paths keep no segments so callers cannot accidentally walk a
    partial prefix.
    """
    if is_bracket_path(path):
        return FieldPath(raw=path, segments=(), supported=False)
    return FieldPath(raw=path, segments=tuple(path.split(PATH_SEPARATOR)))


__all__ = ["FieldPath", "is_bracket_path", "parse_field_path", "PATH_SEPARATOR"]
