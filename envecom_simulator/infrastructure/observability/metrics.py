"""Prometheus metrics for simulation volume, credit values and extraction health"""

from prometheus_client import Counter, Histogram

# Simulation metrics
simulation_counter = Counter(
    "envecom_simulation_total",
    "Total compensation simulations computed",
    ["connection"],  # mono | bi | tri
)

credit_total_histogram = Histogram(
    "envecom_credit_total_brl",
    "Credit total per simulation in BRL",
    buckets=[0, 25, 50, 100, 250, 500, 1000, 2500],
)

# Extraction metrics
extraction_counter = Counter(
    "envecom_extraction_total",
    "Bill image extractions",
    ["outcome"],  # success | failure
)

extraction_latency_histogram = Histogram(
    "envecom_extraction_latency_seconds",
    "Extraction service response time",
    buckets=[0.5, 1.0, 2.5, 5.0, 10.0, 20.0, 40.0, 60.0],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_simulation(connection: str, credit_total: float) -> None:
    """Record simulation metrics"""
    simulation_counter.labels(connection=connection).inc()
    credit_total_histogram.observe(credit_total)


def record_extraction(success: bool) -> None:
    extraction_counter.labels(outcome="success" if success else "failure").inc()
