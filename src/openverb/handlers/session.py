"""
user.session handlers.

Logout is destructive: it only proceeds when the caller passes
confirmed=True. The host's logout may suspend on network I/O.
"""

import locale
import logging
from datetime import datetime
from functools import partial
from typing import Any, Dict

from ..constants import SESSION_VERBS
from .config import OpenVerbConfig, call_host, not_configured

logger = logging.getLogger(__name__)


def default_preferences() -> Dict[str, Any]:
    """Preferences derived from the process locale and local timezone"""
    lang = locale.getlocale()[0]
    if not lang or lang in ("C", "POSIX"):
        lang = "en"
    return {
        "language": lang[:2],
        "timezone": datetime.now().astimezone().tzname() or "UTC",
        "notifications": False,
    }


async def handle_get(config: OpenVerbConfig, payload: Dict[str, Any]) -> Dict[str, Any]:
    if config.get_session is None:
        return {"authenticated": False, "user": None}
    return await call_host(config.get_session)


async def handle_logout(config: OpenVerbConfig, payload: Dict[str, Any]) -> Dict[str, Any]:
    if not payload.get("confirmed"):
        return {"success": False}
    if config.logout is None:
        return not_configured("logout")

    await call_host(config.logout)
    logger.info("User session logged out")
    return {"success": True}


async def handle_get_preferences(config: OpenVerbConfig, payload: Dict[str, Any]) -> Dict[str, Any]:
    if config.get_preferences is None:
        return {"preferences": default_preferences()}
    return {"preferences": await call_host(config.get_preferences)}


def build_handlers(config: OpenVerbConfig):
    return {
        SESSION_VERBS["GET"]: partial(handle_get, config),
        SESSION_VERBS["LOGOUT"]: partial(handle_logout, config),
        SESSION_VERBS["GET_PREFERENCES"]: partial(handle_get_preferences, config),
    }
