from typing import List, TypedDict

from typing_extensions import NotRequired


class SearchResult(TypedDict):
    title: str
    url: str
    snippet: str
    date: NotRequired[str]
    last_updated: NotRequired[str]


class SearchResponse(TypedDict):
    results: List[SearchResult]
    id: str
