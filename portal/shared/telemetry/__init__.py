"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from portal.shared.telemetry.logging import setup_logging
from portal.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
)
from portal.shared.telemetry.tracing import (
    TracedOperation,
    add_span_attributes,
    traced,
)

__all__ = [
    "setup_logging",
    "TelemetryConfig",
    "get_telemetry",
    "set_telemetry",
    "traced",
    "add_span_attributes",
    "TracedOperation",
]
