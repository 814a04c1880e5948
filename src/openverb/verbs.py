"""
Verb Dispatcher: routes a verb id and input payload to its handler.

Every dispatch path ends in a VerbResult dict. Unknown verbs and handler
faults become {"error": ...}; a handler's own return value is passed
through untouched.
"""

import inspect
import logging
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Union

from .config import OpenVerbSettings
from .manifest import ManifestRegistry, load_manifests
from .observability import (
    dispatch_span,
    is_tracing_enabled,
    record_span_error,
    setup_tracing,
)
from .observability.metrics import MetricsContext, metrics_collector
from .schema import SchemaError, validate_payload

logger = logging.getLogger(__name__)

VerbResult = Dict[str, Any]
VerbHandler = Callable[[Dict[str, Any]], Union[VerbResult, Awaitable[VerbResult]]]


def unknown_verb(verb_id: str) -> VerbResult:
    return {"error": f"Unknown verb: {verb_id}"}


def fault_result(exc: BaseException) -> VerbResult:
    return {"error": str(exc)}


class VerbHandlerRegistry:
    """
    Mapping from verb id to handler.

    Built up front from a partial mapping and/or register() calls. Ids that
    were never registered look up as None. Do not register while dispatches
    are in flight.
    """

    def __init__(self, handlers: Optional[Mapping[str, VerbHandler]] = None):
        self._handlers: Dict[str, VerbHandler] = {}
        for verb_id, handler in (handlers or {}).items():
            self.register(verb_id, handler)

    def register(self, verb_id: str, handler: VerbHandler) -> "VerbHandlerRegistry":
        """Register a handler for a verb id"""
        if not callable(handler):
            raise TypeError(f"Handler for {verb_id} must be callable")
        self._handlers[verb_id] = handler
        return self

    def update(self, handlers: Mapping[str, VerbHandler]) -> "VerbHandlerRegistry":
        """Register several handlers, replacing any existing ones"""
        for verb_id, handler in handlers.items():
            self.register(verb_id, handler)
        return self

    def lookup(self, verb_id: str) -> Optional[VerbHandler]:
        return self._handlers.get(verb_id)

    def list_verbs(self) -> list:
        """List all registered verb ids"""
        return list(self._handlers.keys())

    def __contains__(self, verb_id: str) -> bool:
        return verb_id in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)

    def __getitem__(self, verb_id: str) -> VerbHandler:
        return self._handlers[verb_id]


def create_verb_handlers(handlers: Mapping[str, VerbHandler]) -> VerbHandlerRegistry:
    """
    Create a handler registry from partial implementations.

    Verbs without a handler are simply absent; executing them returns an
    "Unknown verb" error.
    """
    return VerbHandlerRegistry(handlers)


async def _invoke(handler: VerbHandler, payload: Dict[str, Any]) -> VerbResult:
    result = handler(payload)
    if inspect.isawaitable(result):
        result = await result
    return result


def _outcome(result: Any) -> str:
    if isinstance(result, dict) and ("error" in result or result.get("success") is False):
        return "declined"
    return "ok"


async def execute_verb(
    handlers: Union[VerbHandlerRegistry, Mapping[str, VerbHandler]],
    verb_id: str,
    input: Optional[Dict[str, Any]] = None,
) -> VerbResult:
    """
    Execute a verb by id against a handler registry.

    Args:
        handlers: Registry (or plain mapping) of verb id -> handler
        verb_id: Verb to execute, e.g. "ui.theme.set"
        input: Verb input payload (defaults to {})

    Returns:
        The handler's result, or {"error": ...}. Never raises for unknown
        verbs or handler faults.
    """
    if isinstance(handlers, VerbHandlerRegistry):
        handler = handlers.lookup(verb_id)
    else:
        handler = handlers.get(verb_id)

    if handler is None:
        logger.warning(f"Unknown verb requested: {verb_id}")
        metrics_collector.record_execution(verb_id, "unknown")
        return unknown_verb(verb_id)

    payload = {} if input is None else input

    with dispatch_span(verb_id) as span:
        with MetricsContext(verb_id):
            try:
                result = await _invoke(handler, payload)
            except Exception as e:
                record_span_error(span, e)
                logger.error(f"Verb {verb_id} failed: {e}", exc_info=True)
                metrics_collector.record_execution(verb_id, "fault")
                return fault_result(e)

    outcome = _outcome(result)
    if outcome == "declined":
        logger.warning(f"Verb {verb_id} declined: {result.get('error', 'success=false')}")
    else:
        logger.debug(f"Verb {verb_id} completed")
    metrics_collector.record_execution(verb_id, outcome)
    return result


class VerbDispatcher:
    """
    Dispatcher bound to one handler registry.

    With a manifest registry and validate_input/validate_output enabled,
    payloads are checked against the verb's declared schemas: bad input is
    rejected before the handler runs, bad output is replaced with an error.
    Verbs with no manifest definition are never checked.
    """

    def __init__(
        self,
        handlers: Optional[VerbHandlerRegistry] = None,
        manifests: Optional[ManifestRegistry] = None,
        validate_input: bool = False,
        validate_output: bool = False,
    ):
        self.handlers = handlers if handlers is not None else VerbHandlerRegistry()
        self.manifests = manifests
        self.validate_input = validate_input
        self.validate_output = validate_output

        if (validate_input or validate_output) and manifests is None:
            raise ValueError("Schema validation requires a manifest registry")

    @classmethod
    def from_settings(
        cls,
        handlers: VerbHandlerRegistry,
        settings: Optional[OpenVerbSettings] = None,
        manifests: Optional[ManifestRegistry] = None,
    ) -> "VerbDispatcher":
        """
        Build a dispatcher from settings (OPENVERB_* environment by default).

        Sets up tracing when an exporter is configured, and loads manifests
        from settings.manifests_dir when schema checks are on and no
        registry is given.
        """
        settings = settings or OpenVerbSettings.from_env()

        if settings.tracing_enabled and not is_tracing_enabled():
            setup_tracing(
                settings.service_name,
                otlp_endpoint=settings.otlp_endpoint,
                console_export=settings.console_spans,
            )

        if manifests is None and (settings.validate_input or settings.validate_output):
            manifests = ManifestRegistry(load_manifests(settings.manifests_dir))

        return cls(
            handlers,
            manifests=manifests,
            validate_input=settings.validate_input,
            validate_output=settings.validate_output,
        )

    def register(self, verb_id: str, handler: VerbHandler):
        """Register a handler for a verb id"""
        self.handlers.register(verb_id, handler)

    def list_verbs(self) -> list:
        return self.handlers.list_verbs()

    def _conformance_error(
        self, verb_id: str, direction: str, schema: Dict[str, Any], payload: Any
    ) -> Optional[VerbResult]:
        """Check one payload; return an error result instead of raising"""
        try:
            validate_payload(verb_id, direction, schema, payload)
            return None
        except SchemaError as e:
            logger.warning(f"Rejected {direction} for {verb_id}: {e.problems}")
            message = str(e)
        except Exception as e:
            logger.error(f"Schema check for {verb_id} failed: {e}", exc_info=True)
            message = str(SchemaError(verb_id, direction, [str(e)]))

        metrics_collector.record_execution(verb_id, "invalid")
        return {"error": message}

    async def execute(self, verb_id: str, input: Optional[Dict[str, Any]] = None) -> VerbResult:
        """Execute a verb, applying schema checks if enabled"""
        payload = {} if input is None else input
        definition = self.manifests.find_verb(verb_id) if self.manifests is not None else None

        if definition is not None and self.validate_input and verb_id in self.handlers:
            error = self._conformance_error(verb_id, "input", definition.input, payload)
            if error is not None:
                return error

        result = await execute_verb(self.handlers, verb_id, payload)

        # Error results are already failures; everything else is checked
        is_error = isinstance(result, dict) and "error" in result
        if definition is not None and self.validate_output and not is_error:
            error = self._conformance_error(verb_id, "output", definition.output, result)
            if error is not None:
                return error

        return result

    async def dispatch(self, request: Any) -> VerbResult:
        """
        Dispatch a wire request of the form {"verbId": ..., "input": {...}}.

        Malformed requests get an error result, never an exception.
        """
        if not isinstance(request, Mapping):
            return {"error": "Request must be an object with a verbId"}
        verb_id = request.get("verbId")
        if not isinstance(verb_id, str) or not verb_id:
            return {"error": "Request missing verbId"}
        payload = request.get("input")
        if payload is not None and not isinstance(payload, Mapping):
            return {"error": f"Request input for {verb_id} must be an object"}
        return await self.execute(verb_id, payload)
