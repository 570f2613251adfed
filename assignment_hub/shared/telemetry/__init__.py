"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from assignment_hub.shared.telemetry.logging import setup_logging
from assignment_hub.shared.telemetry.telemetry import TelemetryConfig
from assignment_hub.shared.telemetry.tracing import (
    add_span_attributes,
    traced,
)

__all__ = [
    "TelemetryConfig",
    "add_span_attributes",
    "setup_logging",
    "traced",
]
