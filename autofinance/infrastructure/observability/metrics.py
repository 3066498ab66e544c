"""Prometheus metrics for calculation volume, errors, and outcome distributions"""

from prometheus_client import Counter, Histogram

# Engine usage
calculation_counter = Counter(
    "autofinance_calculations_total",
    "Engine calculations served",
    ["operation"],
)

calculation_error_counter = Counter(
    "autofinance_calculation_errors_total",
    "Engine calculations rejected with a domain error",
    ["operation", "error"],  # error = exception class name
)

# Outcome distributions
preapproval_counter = Counter(
    "autofinance_preapproval_total",
    "Pre-approval checks by likelihood status",
    ["status"],  # Very Likely | Likely | Possible | Unlikely
)

affordability_counter = Counter(
    "autofinance_affordability_total",
    "Affordability assessments by risk level",
    ["risk_level"],  # low | medium | high
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(operation: str) -> None:
    calculation_counter.labels(operation=operation).inc()


def record_calculation_error(operation: str, error: Exception) -> None:
    calculation_error_counter.labels(operation=operation, error=type(error).__name__).inc()


def record_preapproval(status: str) -> None:
    preapproval_counter.labels(status=status).inc()


def record_affordability(risk_level: str) -> None:
    affordability_counter.labels(risk_level=risk_level).inc()
