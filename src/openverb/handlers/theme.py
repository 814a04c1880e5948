"""
ui.theme handlers: read and change the color theme.
"""

from functools import partial
from typing import Any, Dict

from ..constants import THEME_VERBS
from .config import OpenVerbConfig, call_host, not_configured

DEFAULT_THEME = {"mode": "system", "resolved": "light"}


async def handle_get(config: OpenVerbConfig, payload: Dict[str, Any]) -> Dict[str, Any]:
    if config.get_theme is None:
        return dict(DEFAULT_THEME)
    return await call_host(config.get_theme)


async def handle_set(config: OpenVerbConfig, payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Set the theme mode.

    The host's set_theme returns the previous mode, either bare or as
    {"previousMode": ...}.
    """
    if config.set_theme is None:
        return not_configured("set_theme")

    mode = payload.get("mode")
    previous = await call_host(config.set_theme, mode)
    if isinstance(previous, dict):
        previous = previous.get("previousMode")
    return {"success": True, "mode": mode, "previousMode": previous}


def build_handlers(config: OpenVerbConfig):
    return {
        THEME_VERBS["GET"]: partial(handle_get, config),
        THEME_VERBS["SET"]: partial(handle_set, config),
    }
