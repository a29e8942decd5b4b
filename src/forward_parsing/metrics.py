"""
Prometheus Metrics — forward parser observability.

Exposes:
- Parses by outcome (forwarded / not_forwarded)
- Which extraction method resolved each field (header, narrative, lax, ...)
- Parse latency per stage

Usage
-----
    from src.forward_parsing.metrics import record_parse_outcome, timed_stage

    with timed_stage("read"):
        result = read_forwarded_email(body, subject)

    record_parse_outcome(result.forwarded)

Helpers are no-ops when METRICS_ENABLED is false.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram

from src.config.settings import METRICS_ENABLED

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metric definitions
# ---------------------------------------------------------------------------

# Emails read, labelled by outcome.
PARSE_OUTCOMES: Counter = Counter(
    "forward_parser_emails_total",
    "Emails read by outcome (forwarded / not_forwarded)",
    ["outcome"],
)

# Which method of the fallback chain resolved a field.
FIELD_METHODS: Counter = Counter(
    "forward_parser_field_method_total",
    "Extraction method that resolved each field",
    ["field", "method"],
)

# Processing latency per stage (seconds).
STAGE_LATENCY: Histogram = Histogram(
    "forward_parser_stage_seconds",
    "Processing time per parser stage in seconds",
    ["stage"],
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
)


# ---------------------------------------------------------------------------
# Convenience helpers
# ---------------------------------------------------------------------------

def record_parse_outcome(forwarded: bool) -> None:
    """Increment the outcome counter."""
    if METRICS_ENABLED:
        PARSE_OUTCOMES.labels(outcome="forwarded" if forwarded else "not_forwarded").inc()


def record_field_method(field: str, method: str) -> None:
    """Increment the counter for *field* resolved by *method* ("none" if unresolved)."""
    if METRICS_ENABLED:
        FIELD_METHODS.labels(field=field, method=method).inc()


@contextmanager
def timed_stage(stage: str) -> Generator[None, None, None]:
    """
    Context manager that records stage latency.

    Usage::

        with timed_stage("original_email"):
            email = parser.parse_original_email(text, body)
    """
    if not METRICS_ENABLED:
        yield
        return
    with STAGE_LATENCY.labels(stage=stage).time():
        yield
