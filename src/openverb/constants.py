"""
Verb ID constants for the Level 0 starter verbs.

These are the standard verbs every app should have. Apps define additional
verbs for domain-specific actions in their own manifests.
"""

from typing import Dict, Tuple

THEME_VERBS: Dict[str, str] = {
    "GET": "ui.theme.get",
    "SET": "ui.theme.set",
}

NAV_VERBS: Dict[str, str] = {
    "LIST_PAGES": "ui.nav.list_pages",
    "GO": "ui.nav.go",
    "BACK": "ui.nav.back",
}

SEARCH_VERBS: Dict[str, str] = {
    "QUERY": "ui.search.query",
    "OPEN_RESULT": "ui.search.open_result",
}

TOAST_VERBS: Dict[str, str] = {
    "SHOW": "ui.toast.show",
    "DISMISS": "ui.toast.dismiss",
}

MODAL_VERBS: Dict[str, str] = {
    "OPEN": "ui.modal.open",
    "CLOSE": "ui.modal.close",
    "LIST": "ui.modal.list",
}

FORM_VERBS: Dict[str, str] = {
    "LIST": "ui.form.list",
    "FILL": "ui.form.fill",
    "SUBMIT": "ui.form.submit",
    "RESET": "ui.form.reset",
}

SESSION_VERBS: Dict[str, str] = {
    "GET": "user.session.get",
    "LOGOUT": "user.session.logout",
    "GET_PREFERENCES": "user.session.get_preferences",
}

# All 19 starter verb IDs (Level 0)
ALL_VERB_IDS: Tuple[str, ...] = tuple(
    verb_id
    for family in (
        THEME_VERBS,
        NAV_VERBS,
        SEARCH_VERBS,
        TOAST_VERBS,
        MODAL_VERBS,
        FORM_VERBS,
        SESSION_VERBS,
    )
    for verb_id in family.values()
)
