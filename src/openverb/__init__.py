"""
openverb: the OpenVerb standard library for Python.

Canonical verb definitions for AI-app interaction: 7 families, 19 verbs
covering theme, navigation, search, modals, toasts, forms, and user
sessions, plus the dispatcher and manifest validator behind them.
"""

from .constants import (
    ALL_VERB_IDS,
    FORM_VERBS,
    MODAL_VERBS,
    NAV_VERBS,
    SEARCH_VERBS,
    SESSION_VERBS,
    THEME_VERBS,
    TOAST_VERBS,
)
from .manifest import (
    DuplicateFamilyError,
    ManifestError,
    ManifestRegistry,
    VerbDefinition,
    VerbManifest,
    default_registry,
    load_manifests,
)
from .registries import (
    ModalRegistry,
    RouteRegistry,
    build_dynamic_routes,
    find_route_by_intent,
    get_routes_for_role,
    route_registry,
)
from .schema import SchemaError, check_payload
from .types import (
    FormEntry,
    FormField,
    ModalEntry,
    Route,
    SearchResult,
    SessionUser,
    ToastOptions,
)
from .validator import ManifestValidator, ValidationReport, validate_directory
from .verbs import (
    VerbDispatcher,
    VerbHandler,
    VerbHandlerRegistry,
    VerbResult,
    create_verb_handlers,
    execute_verb,
)
from .handlers import OpenVerbConfig, build_standard_handlers

__version__ = "1.0.0"
