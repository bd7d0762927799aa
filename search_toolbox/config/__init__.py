"""
配置管理包

Environment-driven settings for the search toolbox.
"""

from .search_config import (
    DEFAULT_PERPLEXITY_SEARCH_URL,
    SearchSettings,
    get_perplexity_api_key,
    get_search_settings,
    reset_search_settings_cache,
)

__all__ = [
    "DEFAULT_PERPLEXITY_SEARCH_URL",
    "SearchSettings",
    "get_perplexity_api_key",
    "get_search_settings",
    "reset_search_settings_cache",
]
