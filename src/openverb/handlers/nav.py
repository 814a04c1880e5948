"""
ui.nav handlers: list pages, navigate, go back.
"""

import logging
from functools import partial
from typing import Any, Dict

from ..constants import NAV_VERBS
from .config import OpenVerbConfig, call_host, not_configured

logger = logging.getLogger(__name__)


async def handle_list_pages(config: OpenVerbConfig, payload: Dict[str, Any]) -> Dict[str, Any]:
    return {"routes": [r.to_dict() for r in config.routes]}


async def handle_go(config: OpenVerbConfig, payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Navigate by routeId, falling back to an explicit path.

    An unknown routeId with no path is a failed navigation, not a fault.
    """
    route = config.find_route(payload.get("routeId"))
    path = route.path if route else payload.get("path")
    if not path:
        logger.debug(f"No navigation target for {payload!r}")
        return {"success": False}

    await call_host(config.navigate, path)
    return {"success": True, "path": path}


async def handle_back(config: OpenVerbConfig, payload: Dict[str, Any]) -> Dict[str, Any]:
    if config.go_back is None:
        return not_configured("go_back")
    await call_host(config.go_back)
    return {"success": True}


def build_handlers(config: OpenVerbConfig):
    return {
        NAV_VERBS["LIST_PAGES"]: partial(handle_list_pages, config),
        NAV_VERBS["GO"]: partial(handle_go, config),
        NAV_VERBS["BACK"]: partial(handle_back, config),
    }
