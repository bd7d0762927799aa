"""
Search Toolbox - Perplexity web search tool for AI agents

Exposes the Perplexity Search API as an introspectable, callable tool and a
registry through which agents discover it.
"""

__version__ = "0.1.0"

from .tools import ToolDefinition, ToolRegistry, get_tool_registry
from .tools_impl import register_default_tools
from .tools_impl.perplexity_search import (
    PerplexitySearch,
    PerplexitySearchConfig,
    PerplexitySearchError,
    SearchParameters,
    SearchResponse,
    SearchResult,
    perplexity_search,
    perplexity_search_handler,
    perplexity_search_tool,
)

__all__ = [
    # Tool
    "perplexity_search",
    "PerplexitySearch",
    "PerplexitySearchConfig",
    "PerplexitySearchError",
    "SearchParameters",
    "SearchResult",
    "SearchResponse",
    "perplexity_search_handler",
    "perplexity_search_tool",
    # Registry
    "ToolDefinition",
    "ToolRegistry",
    "get_tool_registry",
    "register_default_tools",
]
