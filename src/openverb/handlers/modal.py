"""
ui.modal handlers.
"""

from functools import partial
from typing import Any, Dict

from ..constants import MODAL_VERBS
from .config import OpenVerbConfig, call_host, not_configured


async def handle_list(config: OpenVerbConfig, payload: Dict[str, Any]) -> Dict[str, Any]:
    return {"modals": [m.to_dict() for m in config.modals]}


async def handle_open(config: OpenVerbConfig, payload: Dict[str, Any]) -> Dict[str, Any]:
    if config.open_modal is None:
        return not_configured("open_modal")
    modal_id = payload.get("modalId")
    await call_host(config.open_modal, modal_id, payload.get("data"))
    return {"success": True, "modalId": modal_id}


async def handle_close(config: OpenVerbConfig, payload: Dict[str, Any]) -> Dict[str, Any]:
    if config.close_modal is None:
        return not_configured("close_modal")
    await call_host(config.close_modal, payload.get("modalId"))
    return {"success": True}


def build_handlers(config: OpenVerbConfig):
    return {
        MODAL_VERBS["LIST"]: partial(handle_list, config),
        MODAL_VERBS["OPEN"]: partial(handle_open, config),
        MODAL_VERBS["CLOSE"]: partial(handle_close, config),
    }
