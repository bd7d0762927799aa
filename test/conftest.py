import json
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer


ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


@pytest.fixture(autouse=True)
def clean_search_env(monkeypatch):
    """Start every test without a credential or endpoint override."""
    from search_toolbox.config import reset_search_settings_cache

    for key in ("PERPLEXITY_API_KEY", "PERPLEXITY_SEARCH_URL", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(key, raising=False)
    reset_search_settings_cache()
    yield
    reset_search_settings_cache()


@dataclass
class FakeUpstream:
    """Local stand-in for the search endpoint; records every request it receives."""

    url: str
    status: int = 200
    body: str = json.dumps(
        {"results": [{"title": "T", "url": "U", "snippet": "S"}], "id": "abc"}
    )
    content_type: str = "application/json"
    requests: List[Dict[str, Any]] = field(default_factory=list)

    def respond(self, status: int, body: Any, content_type: str = "application/json") -> None:
        self.status = status
        self.body = body if isinstance(body, str) else json.dumps(body)
        self.content_type = content_type


@pytest_asyncio.fixture
async def upstream():
    state = FakeUpstream(url="")

    async def handle(request: web.Request) -> web.Response:
        state.requests.append(
            {
                "method": request.method,
                "headers": dict(request.headers),
                "json": await request.json(),
            }
        )
        return web.Response(status=state.status, text=state.body, content_type=state.content_type)

    app = web.Application()
    app.router.add_post("/search", handle)
    server = TestServer(app)
    await server.start_server()
    state.url = str(server.make_url("/search"))
    try:
        yield state
    finally:
        await server.close()
