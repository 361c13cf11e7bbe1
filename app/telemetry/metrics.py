"""Prometheus metrics definitions and helpers."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests processed",
    ("method", "route", "status"),
)

REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ("method", "route"),
    buckets=(
        0.005,
        0.01,
        0.025,
        0.05,
        0.1,
        0.25,
        0.5,
        1.0,
        2.5,
        5.0,
        10.0,
        30.0,
    ),
)

ERROR_COUNTER = Counter(
    "app_internal_errors_total",
    "Number of requests ending in internal server error responses",
    ("method", "route"),
)

FEEDBACK_COUNTER = Counter(
    "coaching_feedback_total",
    "Coaching feedback results by source",
    ("source",),
)

PROVIDER_TOKENS = Counter(
    "coaching_provider_tokens_total",
    "Tokens reported by the coaching model on successful calls",
    ("direction",),
)

PROVIDER_FAILURES = Counter(
    "coaching_provider_failures_total",
    "Coaching model calls that failed and fell back to mock feedback",
)

DEGRADED_RESPONSES = Counter(
    "coaching_normalization_degraded_total",
    "Coaching model replies that could not be parsed into structured feedback",
)


def observe_request(
    method: str,
    route: str,
    status_code: int,
    duration_seconds: float,
) -> None:
    """Record metrics for a completed HTTP request."""

    safe_route = route or "unknown"
    safe_method = method or "UNKNOWN"
    status_label = str(status_code)
    observed_duration = duration_seconds if duration_seconds >= 0 else 0

    REQUEST_COUNT.labels(
        method=safe_method,
        route=safe_route,
        status=status_label,
    ).inc()
    REQUEST_LATENCY.labels(
        method=safe_method,
        route=safe_route,
    ).observe(observed_duration)

    if status_code >= 500:
        ERROR_COUNTER.labels(
            method=safe_method,
            route=safe_route,
        ).inc()


def record_feedback_source(source: str) -> None:
    """Count one coaching result by where its feedback came from."""

    FEEDBACK_COUNTER.labels(source=source).inc()


def record_provider_usage(input_tokens: int | None, output_tokens: int | None) -> None:
    """Add the model's reported token usage to the running totals."""

    if input_tokens:
        PROVIDER_TOKENS.labels(direction="input").inc(input_tokens)
    if output_tokens:
        PROVIDER_TOKENS.labels(direction="output").inc(output_tokens)


def record_provider_failure() -> None:
    PROVIDER_FAILURES.inc()


def record_degraded_response() -> None:
    DEGRADED_RESPONSES.inc()
