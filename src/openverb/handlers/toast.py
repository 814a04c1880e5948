"""
ui.toast handlers.
"""

from functools import partial
from typing import Any, Dict

from ..constants import TOAST_VERBS
from ..types import ToastOptions
from .config import OpenVerbConfig, call_host, not_configured


async def handle_show(config: OpenVerbConfig, payload: Dict[str, Any]) -> Dict[str, Any]:
    if config.show_toast is None:
        return not_configured("show_toast")

    # Raises ValueError on an unknown variant; the dispatcher reports it
    options = ToastOptions.from_input(payload)
    toast_id = await call_host(config.show_toast, options)
    return {"success": True, "toastId": toast_id}


async def handle_dismiss(config: OpenVerbConfig, payload: Dict[str, Any]) -> Dict[str, Any]:
    if config.dismiss_toast is None:
        return not_configured("dismiss_toast")
    await call_host(config.dismiss_toast, payload.get("toastId"))
    return {"success": True}


def build_handlers(config: OpenVerbConfig):
    return {
        TOAST_VERBS["SHOW"]: partial(handle_show, config),
        TOAST_VERBS["DISMISS"]: partial(handle_dismiss, config),
    }
