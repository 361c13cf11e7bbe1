"""Telemetry helpers and metrics."""

from .metrics import (
    DEGRADED_RESPONSES,
    ERROR_COUNTER,
    FEEDBACK_COUNTER,
    PROVIDER_FAILURES,
    PROVIDER_TOKENS,
    REQUEST_COUNT,
    REQUEST_LATENCY,
    observe_request,
    record_degraded_response,
    record_feedback_source,
    record_provider_failure,
    record_provider_usage,
)

__all__ = [
    "DEGRADED_RESPONSES",
    "ERROR_COUNTER",
    "FEEDBACK_COUNTER",
    "PROVIDER_FAILURES",
    "PROVIDER_TOKENS",
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "observe_request",
    "record_degraded_response",
    "record_feedback_source",
    "record_provider_failure",
    "record_provider_usage",
]
