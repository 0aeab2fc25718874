"""Marker decorator for methods exposed as MCP tools.

``Tools.register`` discovers decorated methods by the ``_mcp_tool`` attribute
and hands them to FastMCP together with the stored description.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

F = TypeVar("F", bound=Callable[..., Any])


def mcp_tool(description: str = "") -> Callable[[F], F]:
    def decorator(func: F) -> F:
        func._mcp_tool = True  # type: ignore[attr-defined]
        func._mcp_description = description  # type: ignore[attr-defined]
        return func

    return decorator


__all__ = ["mcp_tool"]
