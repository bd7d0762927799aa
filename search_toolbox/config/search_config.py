"""
Web Search 配置

Endpoint and logging settings for the Perplexity search tool. The API key is
deliberately not part of the cached settings: it is looked up on every call.
"""

from dataclasses import dataclass
from functools import lru_cache
import os
from typing import Optional

DEFAULT_PERPLEXITY_SEARCH_URL = "https://api.perplexity.ai/search"


@dataclass(slots=True)
class SearchSettings:
    """Web Search 模块配置"""

    perplexity_search_url: str = DEFAULT_PERPLEXITY_SEARCH_URL

    log_level: str = "INFO"
    log_format: str = "json"  # json | plain


def _env(key: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(key)
    if value is None:
        return default
    value = value.strip()
    return value or default


def get_perplexity_api_key() -> Optional[str]:
    """Read PERPLEXITY_API_KEY from the environment (uncached)."""

    return _env("PERPLEXITY_API_KEY")


@lru_cache(maxsize=1)
def get_search_settings() -> SearchSettings:
    """读取环境变量并返回 SearchSettings"""

    search_url = _env("PERPLEXITY_SEARCH_URL", DEFAULT_PERPLEXITY_SEARCH_URL)
    log_level = _env("LOG_LEVEL", "INFO")
    log_format = _env("LOG_FORMAT", "json")

    return SearchSettings(
        perplexity_search_url=search_url or DEFAULT_PERPLEXITY_SEARCH_URL,
        log_level=(log_level or "INFO").upper(),
        log_format=(log_format or "json").lower(),
    )


def reset_search_settings_cache() -> None:
    """测试场景下清理缓存"""

    get_search_settings.cache_clear()  # type: ignore[attr-defined]
