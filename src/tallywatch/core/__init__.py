"""Motor de auditoría comparativa de series temporales.

English:
    Comparative time-series audit engine: normalize, compare, aggregate.
"""

from tallywatch.core.aggregate import aggregate
from tallywatch.core.compare import comparative_time_series, compare_pair, implied_total, lead
from tallywatch.core.errors import (
    AuditError,
    InsufficientDataError,
    OrderingAmbiguityError,
    SchemaError,
)
from tallywatch.core.models import AggregateReport, Candidate, ComparisonRecord, Snapshot
from tallywatch.core.normalize import normalize_timeseries

__all__ = [
    "AggregateReport",
    "AuditError",
    "Candidate",
    "ComparisonRecord",
    "InsufficientDataError",
    "OrderingAmbiguityError",
    "SchemaError",
    "Snapshot",
    "aggregate",
    "comparative_time_series",
    "compare_pair",
    "implied_total",
    "lead",
    "normalize_timeseries",
]
