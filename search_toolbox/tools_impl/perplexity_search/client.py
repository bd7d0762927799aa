"""
Perplexity Search tool.

The tool object is a stateless descriptor (name, description, parameter
schema) plus an ``execute`` coroutine. The API key is resolved when
``execute`` runs, so the tool can be created and registered before any
credential is configured.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import aiohttp

from search_toolbox.config import get_perplexity_api_key, get_search_settings

from .exceptions import PerplexitySearchError
from .parameters import SearchParameters, parameters_schema, validate_parameters
from .result import SearchResponse

logger = logging.getLogger(__name__)

TOOL_NAME = "perplexity_search"
TOOL_DESCRIPTION = (
    "Search the web using Perplexity's Search API for real-time information, news, research papers, "
    "and articles. Provides ranked search results with advanced filtering options including domain, "
    "language, date range, and recency filters."
)
MISSING_KEY_MESSAGE = (
    "PERPLEXITY_API_KEY is required. Set it in environment variables or pass it in config."
)
TOOL_TAGS = ["search", "web", "information", "retrieval", "perplexity"]
TOOL_EXAMPLES = [
    "Search for the latest AI news",
    "Find research papers on CRISPR published after 1/1/2025",
    "Recent articles from nature.com about climate models",
]


@dataclass(slots=True)
class PerplexitySearchConfig:
    """Explicit overrides; unset values fall back to the environment."""

    api_key: Optional[str] = None
    api_url: Optional[str] = None


class PerplexitySearch:
    """Callable search tool backed by the Perplexity Search API."""

    name = TOOL_NAME
    description = TOOL_DESCRIPTION

    def __init__(self, config: Optional[PerplexitySearchConfig] = None) -> None:
        self.config = config or PerplexitySearchConfig()

    @property
    def input_schema(self) -> Dict[str, Any]:
        return parameters_schema()

    @property
    def api_url(self) -> str:
        return self.config.api_url or get_search_settings().perplexity_search_url

    def _resolve_api_key(self) -> str:
        api_key = self.config.api_key or get_perplexity_api_key()
        if not api_key:
            raise PerplexitySearchError(code="missing_api_key", message=MISSING_KEY_MESSAGE)
        return api_key

    def build_request_body(self, **params: Any) -> Dict[str, Any]:
        return validate_parameters(params).to_request_body()

    async def execute(self, **params: Any) -> SearchResponse:
        """Validate ``params``, call the search endpoint and return its JSON body."""
        parameters = validate_parameters(params)
        api_key = self._resolve_api_key()
        return await self._post(parameters, api_key)

    async def _post(self, parameters: SearchParameters, api_key: str) -> SearchResponse:
        headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
        payload = parameters.to_request_body()
        api_url = self.api_url

        logger.debug(
            "Perplexity search request",
            extra={"queries": parameters.queries, "max_results": parameters.max_results},
        )

        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(api_url, headers=headers, json=payload) as response:
                    text = await response.text()
                    if not 200 <= response.status < 300:
                        raise PerplexitySearchError(
                            code="http_error",
                            message=f"Perplexity Search API error: {response.status} - {text}",
                            meta={"status": response.status, "body": text},
                        )
        except PerplexitySearchError:
            raise
        except Exception as exc:
            logger.error("Perplexity search request failed: %s", exc)
            message = str(exc).strip() or type(exc).__name__
            raise PerplexitySearchError(
                code="request_failed",
                message=f"Failed to search with Perplexity Search API: {message}",
                meta={"exception": type(exc).__name__},
            ) from exc

        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise PerplexitySearchError(
                code="invalid_response",
                message=f"Failed to search with Perplexity Search API: {exc}",
            ) from exc
        if not isinstance(data, dict):
            raise PerplexitySearchError(
                code="invalid_response",
                message=(
                    "Failed to search with Perplexity Search API: "
                    f"expected a JSON object, got {type(data).__name__}"
                ),
            )

        results = data.get("results")
        logger.info(
            "Perplexity search completed",
            extra={
                "request_id": data.get("id"),
                "result_count": len(results) if isinstance(results, list) else 0,
            },
        )
        return data  # type: ignore[return-value]


def perplexity_search(config: Optional[PerplexitySearchConfig] = None) -> PerplexitySearch:
    """Create the search tool. Never fails; the API key is checked on execute."""
    return PerplexitySearch(config)
