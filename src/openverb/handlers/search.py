"""
ui.search handlers.

Without a host search callback, queries run against the route list.
"""

from functools import partial
from typing import Any, Dict, Iterable, Optional

from ..constants import SEARCH_VERBS
from ..types import Route, SearchResult
from .config import OpenVerbConfig, call_host

DEFAULT_LIMIT = 10


def search_routes(
    routes: Iterable[Route], query: str, scope: Optional[str] = None, limit: int = DEFAULT_LIMIT
) -> Dict[str, Any]:
    """Default search: page results for routes matching title or tags"""
    matches = [r for r in routes if r.matches(query)][:limit]
    results = [SearchResult.from_route(r).to_dict() for r in matches]
    return {"results": results, "total": len(results)}


async def handle_query(config: OpenVerbConfig, payload: Dict[str, Any]) -> Dict[str, Any]:
    query = payload.get("query") or ""
    scope = payload.get("scope")
    limit = payload.get("limit")

    if config.search is not None:
        return await call_host(config.search, query, scope, limit)
    return search_routes(config.routes, query, scope, DEFAULT_LIMIT if limit is None else limit)


async def handle_open_result(config: OpenVerbConfig, payload: Dict[str, Any]) -> Dict[str, Any]:
    route = config.find_route(payload.get("resultId"))
    if route is None:
        return {"success": False}
    await call_host(config.navigate, route.path)
    return {"success": True, "url": route.path}


def build_handlers(config: OpenVerbConfig):
    return {
        SEARCH_VERBS["QUERY"]: partial(handle_query, config),
        SEARCH_VERBS["OPEN_RESULT"]: partial(handle_open_result, config),
    }
