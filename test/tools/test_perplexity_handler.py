import pytest

from search_toolbox.tools import ToolDefinition, ToolRegistry
from search_toolbox.tools_impl import perplexity_search_tool, register_default_tools
from search_toolbox.tools_impl.perplexity_search import perplexity_search_handler


@pytest.mark.asyncio
async def test_handler_success(upstream, monkeypatch):
    monkeypatch.setenv("PERPLEXITY_SEARCH_URL", upstream.url)
    result = await perplexity_search_handler(api_key="secret", query="q", max_results=3)

    assert result["success"] is True
    assert result["id"] == "abc"
    assert result["total_results"] == 1
    assert result["results"][0]["title"] == "T"
    assert upstream.requests[0]["json"]["max_results"] == 3


@pytest.mark.asyncio
async def test_handler_reports_missing_key(upstream, monkeypatch):
    monkeypatch.setenv("PERPLEXITY_SEARCH_URL", upstream.url)
    result = await perplexity_search_handler(query="q")

    assert result["success"] is False
    assert result["code"] == "missing_api_key"
    assert result["provider"] == "perplexity"
    assert upstream.requests == []


@pytest.mark.asyncio
async def test_handler_reports_invalid_input():
    result = await perplexity_search_handler(api_key="secret", query="q", search_recency_filter="hour")

    assert result["success"] is False
    assert result["code"] == "invalid_input"
    assert result["meta"]["errors"][0]["loc"] == ["search_recency_filter"]


@pytest.mark.asyncio
async def test_handler_reports_upstream_error(upstream, monkeypatch):
    monkeypatch.setenv("PERPLEXITY_SEARCH_URL", upstream.url)
    upstream.respond(429, "rate limited", content_type="text/plain")

    result = await perplexity_search_handler(api_key="secret", query="q")
    assert result["success"] is False
    assert result["code"] == "http_error"
    assert result["meta"]["status"] == 429


def test_tool_definition_dict():
    assert perplexity_search_tool["name"] == "perplexity_search"
    assert perplexity_search_tool["handler"] is perplexity_search_handler
    assert perplexity_search_tool["parameters_schema"]["required"] == ["query"]


def test_register_default_tools_exposes_schema_without_credential():
    registry = register_default_tools(ToolRegistry())

    info = registry.get_tool_info("perplexity_search")
    assert info is not None
    assert info["category"] == "information_retrieval"
    assert "search_recency_filter" in info["parameters_schema"]["properties"]
    assert registry.list_categories() == ["information_retrieval"]
    assert [tool.name for tool in registry.search_tools("perplexity")] == ["perplexity_search"]


def test_registry_unregister():
    registry = ToolRegistry()
    registry.register_tool(ToolDefinition(**perplexity_search_tool))

    assert registry.unregister_tool("perplexity_search") is True
    assert registry.list_tools() == []
    assert registry.list_categories() == []
    assert registry.unregister_tool("perplexity_search") is False
