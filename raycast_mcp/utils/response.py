"""Standardized response utilities for MCP tools."""

from dataclasses import dataclass
from typing import List

from mcp.types import TextContent


@dataclass(frozen=True)
class OperationResult:
    """Successful outcome of an operation: a single human-readable message."""
    text: str

    def to_content(self) -> List[TextContent]:
        """Render as MCP tool-call content."""
        return [TextContent(type="text", text=self.text)]


def success_response(text: str) -> OperationResult:
    """Create a successful text result.

    Args:
        text: Confirmation message shown to the caller

    Returns:
        OperationResult wrapping the message
    """
    return OperationResult(text=text)
