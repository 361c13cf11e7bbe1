"""HTTP middleware: request logging and Prometheus instrumentation."""

from .logging import StructuredLoggingMiddleware
from .telemetry import TelemetryMiddleware

__all__ = ["StructuredLoggingMiddleware", "TelemetryMiddleware"]
