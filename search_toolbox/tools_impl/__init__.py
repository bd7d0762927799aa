"""
Tool Implementations

Concrete tools that can be used by AI agents.
"""

from typing import Optional

from ..tools import ToolDefinition, ToolRegistry, get_tool_registry
from .perplexity_search import perplexity_search_tool


def register_default_tools(registry: Optional[ToolRegistry] = None) -> ToolRegistry:
    """Register every bundled tool and return the registry used."""
    registry = registry or get_tool_registry()
    registry.register_tool(ToolDefinition(**perplexity_search_tool))
    return registry


__all__ = [
    "perplexity_search_tool",
    "register_default_tools",
]
