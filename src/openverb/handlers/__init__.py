"""
Standard verb handlers package.

One module per verb family; each exposes build_handlers(config) returning
its verb id -> handler mapping.
"""

from ..verbs import VerbHandlerRegistry
from . import form, modal, nav, search, session, theme, toast
from .config import OpenVerbConfig

FAMILY_MODULES = (theme, nav, search, toast, modal, form, session)


def build_standard_handlers(config: OpenVerbConfig) -> VerbHandlerRegistry:
    """Bind all 19 standard verbs to the host's configuration"""
    registry = VerbHandlerRegistry()
    for module in FAMILY_MODULES:
        registry.update(module.build_handlers(config))
    return registry


__all__ = ["OpenVerbConfig", "build_standard_handlers", "FAMILY_MODULES"]
