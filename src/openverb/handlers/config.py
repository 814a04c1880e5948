"""
Host configuration for the standard verb handlers.

The host app supplies its routes, modals and callbacks; any callback left
as None makes the verbs that need it report "<callback> not configured".
Callbacks may be plain functions or coroutine functions.
"""

import inspect
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from ..types import ModalEntry, Route


@dataclass
class OpenVerbConfig:
    """
    Attributes:
        routes: Pages the agent may navigate to
        navigate: navigate(path) -> None
        modals: Modals the agent may open
        go_back: go_back() -> None
        show_toast: show_toast(ToastOptions) -> toast id
        dismiss_toast: dismiss_toast(toast_id or None) -> None
        open_modal: open_modal(modal_id, data) -> None
        close_modal: close_modal(modal_id or None) -> None
        get_theme: get_theme() -> {"mode": ..., "resolved": ...}
        set_theme: set_theme(mode) -> previous mode
        get_session: get_session() -> {"authenticated": ..., "user": ...}
        logout: logout() -> None, may suspend on network I/O
        get_preferences: get_preferences() -> dict
        search: search(query, scope, limit) -> {"results": [...], "total": n}
        list_forms: list_forms() -> [FormEntry | dict]
        fill_form: fill_form(form_id, values) -> filled names, None if no form
        submit_form: submit_form(form_id) -> errors list, None if no form
        reset_form: reset_form(form_id) -> bool
    """

    routes: List[Route]
    navigate: Callable[[str], Any]
    modals: List[ModalEntry] = field(default_factory=list)
    go_back: Optional[Callable[[], Any]] = None
    show_toast: Optional[Callable[..., Any]] = None
    dismiss_toast: Optional[Callable[[Optional[str]], Any]] = None
    open_modal: Optional[Callable[[str, Optional[Dict[str, Any]]], Any]] = None
    close_modal: Optional[Callable[[Optional[str]], Any]] = None
    get_theme: Optional[Callable[[], Any]] = None
    set_theme: Optional[Callable[[str], Any]] = None
    get_session: Optional[Callable[[], Any]] = None
    logout: Optional[Callable[[], Any]] = None
    get_preferences: Optional[Callable[[], Any]] = None
    search: Optional[Callable[..., Any]] = None
    list_forms: Optional[Callable[[], Any]] = None
    fill_form: Optional[Callable[[str, Dict[str, Any]], Any]] = None
    submit_form: Optional[Callable[[str], Any]] = None
    reset_form: Optional[Callable[[str], Any]] = None

    def find_route(self, route_id: Optional[str]) -> Optional[Route]:
        if not route_id:
            return None
        for route in self.routes:
            if route.id == route_id:
                return route
        return None


def not_configured(name: str) -> Dict[str, Any]:
    return {"success": False, "error": f"{name} not configured"}


async def call_host(fn: Callable[..., Any], *args) -> Any:
    """Call a host callback, awaiting it if it is a coroutine"""
    result = fn(*args)
    if inspect.isawaitable(result):
        result = await result
    return result
