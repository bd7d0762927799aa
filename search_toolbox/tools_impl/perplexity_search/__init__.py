"""
Perplexity Search tool package.

Expose the tool object, its definition and the handler used by toolbox integration.
"""

from .client import (
    TOOL_DESCRIPTION,
    TOOL_EXAMPLES,
    TOOL_NAME,
    TOOL_TAGS,
    PerplexitySearch,
    PerplexitySearchConfig,
    perplexity_search,
)
from .exceptions import PerplexitySearchError
from .handler import perplexity_search_handler
from .parameters import SearchParameters, parameters_schema, validate_parameters
from .result import SearchResponse, SearchResult

perplexity_search_tool = {
    "name": TOOL_NAME,
    "description": TOOL_DESCRIPTION,
    "category": "information_retrieval",
    "parameters_schema": parameters_schema(),
    "handler": perplexity_search_handler,
    "tags": list(TOOL_TAGS),
    "examples": list(TOOL_EXAMPLES),
}

__all__ = [
    "perplexity_search_tool",
    "perplexity_search_handler",
    "perplexity_search",
    "PerplexitySearch",
    "PerplexitySearchConfig",
    "PerplexitySearchError",
    "SearchParameters",
    "SearchResult",
    "SearchResponse",
    "parameters_schema",
    "validate_parameters",
]
