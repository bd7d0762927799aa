from typing import Any, Dict, Optional


class PerplexitySearchError(Exception):
    """统一的 Perplexity Search 错误类型

    ``code`` is one of ``invalid_input``, ``missing_api_key``, ``http_error``,
    ``request_failed`` or ``invalid_response``.
    """

    def __init__(
        self,
        code: str,
        message: str,
        *,
        provider: str = "perplexity",
        meta: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.code = code
        self.message = message
        self.provider = provider
        self.meta = meta or {}
        super().__init__(message)
