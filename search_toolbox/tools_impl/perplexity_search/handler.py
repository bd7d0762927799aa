import logging
from typing import Any, Dict, Optional

from .client import PerplexitySearchConfig, perplexity_search
from .exceptions import PerplexitySearchError

logger = logging.getLogger(__name__)


def _format_success(query: Any, response: Dict[str, Any]) -> Dict[str, Any]:
    results = response.get("results")
    if not isinstance(results, list):
        results = []
    return {
        "query": query,
        "provider": "perplexity",
        "success": True,
        "error": None,
        "id": response.get("id"),
        "results": results,
        "total_results": len(results),
    }


def _failure_payload(query: Any, provider: str, code: str, message: str, *, meta: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "query": query,
        "provider": provider,
        "success": False,
        "error": message,
        "code": code,
    }
    if meta:
        payload["meta"] = meta
    return payload


async def perplexity_search_handler(api_key: Optional[str] = None, **params: Any) -> Dict[str, Any]:
    """
    Perplexity search entry point exposed to toolbox integration.

    Never raises; failures are reported through ``success``/``code``/``error``.
    """

    query = params.get("query")
    tool = perplexity_search(PerplexitySearchConfig(api_key=api_key))

    try:
        response = await tool.execute(**params)
        return _format_success(query, response)
    except PerplexitySearchError as exc:
        logger.warning(
            "Perplexity search error: %s",
            exc.message,
            extra={"provider": exc.provider, "code": exc.code},
        )
        return _failure_payload(query, exc.provider, exc.code, exc.message, meta=exc.meta)
    except Exception as exc:  # pragma: no cover - defensive path
        logger.exception("Unexpected perplexity search failure")
        return _failure_payload(query, "perplexity", "unexpected_error", str(exc))
