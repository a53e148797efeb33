"""Prometheus metrics for record writes, debt schedules and summaries"""

from prometheus_client import Counter, Histogram

# Record metrics
records_written_counter = Counter(
    "finance_records_written_total",
    "Expense/revenue/debt writes",
    ["entity", "operation"],  # expense | revenue | debt ; create | replace | patch | update | delete
)

# Debt metrics
schedule_generated_counter = Counter(
    "finance_installment_schedules_total",
    "Installment schedules generated",
    ["reason"],  # created | regenerated
)

installments_per_debt_histogram = Histogram(
    "finance_installments_per_debt",
    "Installment count of generated schedules",
    buckets=[1, 2, 3, 6, 12, 24, 36, 48, 60, 120],
)

# Dashboard metrics
summary_counter = Counter(
    "finance_summary_total",
    "Dashboard summaries served",
    ["kind"],  # monthly | annual
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_write(entity: str, operation: str) -> None:
    records_written_counter.labels(entity=entity, operation=operation).inc()


def record_schedule(reason: str, installments: int) -> None:
    """Record a generated schedule and its size"""
    schedule_generated_counter.labels(reason=reason).inc()
    installments_per_debt_histogram.observe(installments)
