"""
ui.form handlers.

Form access is host-specific. When the host provides no form callbacks,
the verbs report an empty, always-successful form surface.
"""

from functools import partial
from typing import Any, Dict

from ..constants import FORM_VERBS
from .config import OpenVerbConfig, call_host

FORM_NOT_FOUND = {"field": "_form", "message": "Form not found"}


async def handle_list(config: OpenVerbConfig, payload: Dict[str, Any]) -> Dict[str, Any]:
    if config.list_forms is None:
        return {"forms": []}
    forms = await call_host(config.list_forms)
    return {"forms": [f.to_dict() if hasattr(f, "to_dict") else f for f in forms]}


async def handle_fill(config: OpenVerbConfig, payload: Dict[str, Any]) -> Dict[str, Any]:
    if config.fill_form is None:
        return {"success": True, "filled": []}
    filled = await call_host(config.fill_form, payload.get("formId"), payload.get("values") or {})
    if filled is None:
        return {"success": False, "filled": []}
    return {"success": True, "filled": list(filled)}


async def handle_submit(config: OpenVerbConfig, payload: Dict[str, Any]) -> Dict[str, Any]:
    if config.submit_form is None:
        return {"success": True, "errors": []}
    errors = await call_host(config.submit_form, payload.get("formId"))
    if errors is None:
        return {"success": False, "errors": [dict(FORM_NOT_FOUND)]}
    errors = list(errors)
    return {"success": not errors, "errors": errors}


async def handle_reset(config: OpenVerbConfig, payload: Dict[str, Any]) -> Dict[str, Any]:
    if config.reset_form is None:
        return {"success": True}
    return {"success": bool(await call_host(config.reset_form, payload.get("formId")))}


def build_handlers(config: OpenVerbConfig):
    return {
        FORM_VERBS["LIST"]: partial(handle_list, config),
        FORM_VERBS["FILL"]: partial(handle_fill, config),
        FORM_VERBS["SUBMIT"]: partial(handle_submit, config),
        FORM_VERBS["RESET"]: partial(handle_reset, config),
    }
