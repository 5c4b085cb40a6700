"""Prometheus metrics for monitoring report outcomes, ages and ledger health"""

from prometheus_client import Counter, Histogram

from age_of_money.domain.models import AgeOfMoneyReport

# Report metrics
report_counter = Counter(
    "age_of_money_report_total",
    "Total age of money reports computed",
    ["outcome"],  # complete | insufficient
)

trend_counter = Counter(
    "age_of_money_trend_total",
    "Trend labels reported",
    ["trend"],  # up | down | stable
)

age_histogram = Histogram(
    "age_of_money_days",
    "Current age of money per report, in days",
    buckets=[0, 7, 14, 30, 60, 90, 180, 365],
)

# Ledger API metrics
ledger_fetch_failures_counter = Counter(
    "ledger_fetch_failures_total",
    "Failed ledger API calls",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_report(report: AgeOfMoneyReport) -> None:
    """Record report metrics for monitoring data coverage and age distribution"""
    outcome = "insufficient" if report.insufficient_data else "complete"
    report_counter.labels(outcome=outcome).inc()
    trend_counter.labels(trend=report.trend).inc()

    # Reports with no matched expenses have no age to observe
    if report.current_age is not None:
        age_histogram.observe(report.current_age)
