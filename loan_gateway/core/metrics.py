"""Prometheus metrics for the Loan Gateway service.

Metrics are organized into two categories:

Business Metrics:
- loan_gateway_registrations_total: Registration attempts by outcome
- loan_gateway_logins_total: Login attempts by outcome
- loan_gateway_loan_applications_total: Loan applications submitted
- loan_gateway_loan_actions_total: Approve/reject actions
- loan_gateway_eligibility_requests_total: AI eligibility checks by status

Technical Metrics:
- loan_gateway_eligibility_latency_seconds: AI model call latency
- loan_gateway_auth_failures_total: Rejected bearer tokens by reason
- loan_gateway_http_requests_total: HTTP requests by endpoint/status
- loan_gateway_http_request_latency_seconds: HTTP latency by endpoint
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

registrations_total = Counter(
    "loan_gateway_registrations_total",
    "Total number of registration attempts",
    ["outcome"],  # success, duplicate
)

logins_total = Counter(
    "loan_gateway_logins_total",
    "Total number of login attempts",
    ["outcome"],  # success, invalid_credentials
)

loan_applications_total = Counter(
    "loan_gateway_loan_applications_total",
    "Total number of loan applications submitted",
)

loan_actions_total = Counter(
    "loan_gateway_loan_actions_total",
    "Total number of loan status actions applied",
    ["action"],  # approve, reject
)

eligibility_requests_total = Counter(
    "loan_gateway_eligibility_requests_total",
    "Total number of AI eligibility checks",
    ["status"],  # success, failure
)


# =============================================================================
# Technical Metrics
# =============================================================================

eligibility_latency = Histogram(
    "loan_gateway_eligibility_latency_seconds",
    "Generative model call latency in seconds",
    buckets=[0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0],
)

auth_failures_total = Counter(
    "loan_gateway_auth_failures_total",
    "Total number of rejected authentication attempts",
    ["reason"],  # missing_token, invalid_token
)

http_requests_total = Counter(
    "loan_gateway_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "loan_gateway_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_registration(outcome: str) -> None:
    """Record a registration attempt."""
    registrations_total.labels(outcome=outcome).inc()


def record_login(outcome: str) -> None:
    """Record a login attempt."""
    logins_total.labels(outcome=outcome).inc()


def record_loan_application() -> None:
    """Record a submitted loan application."""
    loan_applications_total.inc()


def record_loan_action(action: str) -> None:
    """Record an approve/reject action."""
    loan_actions_total.labels(action=action).inc()


def record_eligibility_request(success: bool) -> None:
    """Record the outcome of an eligibility check."""
    eligibility_requests_total.labels(status="success" if success else "failure").inc()


def record_auth_failure(reason: str) -> None:
    """Record a rejected authentication attempt."""
    auth_failures_total.labels(reason=reason).inc()


@contextmanager
def track_eligibility_latency() -> Generator[None, None, None]:
    """Context manager to track generative model latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        eligibility_latency.observe(duration)


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
