"""
OpenVerb settings and environment loading.
"""

import os
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .manifest import BUNDLED_MANIFESTS_DIR

logger = logging.getLogger(__name__)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass
class OpenVerbSettings:
    """
    Runtime settings.

    Attributes:
        manifests_dir: Directory the validator and loader read manifests from
        log_level: Logging level name for CLI entry points
        validate_input: Check verb input against manifest schemas
        validate_output: Check handler output against manifest schemas
        service_name: Service name reported in traces
        otlp_endpoint: OTLP collector endpoint; tracing is off when unset
        console_spans: Also export spans to the console
    """

    manifests_dir: Path = BUNDLED_MANIFESTS_DIR
    log_level: str = "WARNING"
    validate_input: bool = False
    validate_output: bool = False
    service_name: str = "openverb"
    otlp_endpoint: Optional[str] = None
    console_spans: bool = False

    @property
    def tracing_enabled(self) -> bool:
        return bool(self.otlp_endpoint) or self.console_spans

    @classmethod
    def from_env(cls) -> "OpenVerbSettings":
        """Create settings from OPENVERB_* environment variables"""
        return cls(
            manifests_dir=Path(os.getenv("OPENVERB_MANIFESTS_DIR", str(BUNDLED_MANIFESTS_DIR))),
            log_level=os.getenv("OPENVERB_LOG_LEVEL", "WARNING").upper(),
            validate_input=_env_flag("OPENVERB_VALIDATE_INPUT"),
            validate_output=_env_flag("OPENVERB_VALIDATE_OUTPUT"),
            service_name=os.getenv("OPENVERB_SERVICE_NAME", "openverb"),
            otlp_endpoint=os.getenv("OPENVERB_OTLP_ENDPOINT") or None,
            console_spans=_env_flag("OPENVERB_CONSOLE_SPANS"),
        )
