"""Pipeline de auditoría por región.

English:
    Per-region audit pipeline: normalize -> analyze -> aggregate.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

import structlog

from tallywatch.config import AuditSettings
from tallywatch.core.aggregate import aggregate
from tallywatch.core.compare import comparative_time_series
from tallywatch.core.models import AggregateReport, ComparisonRecord, Snapshot
from tallywatch.core.normalize import normalize_timeseries
from tallywatch.logging import bind_context
from tallywatch.schemas import load_region


@dataclass(frozen=True)
class RegionAudit:
    """Resultado completo de auditar una región.

    English: Full audit result for one region.
    """

    region: str
    snapshots: List[Snapshot]
    records: List[ComparisonRecord]
    report: AggregateReport

    @property
    def current_total_votes(self) -> int:
        return self.snapshots[-1].total_votes

    @property
    def current_percent_for_trump(self) -> float:
        return self.snapshots[-1].vote_share_trump

    @property
    def current_percent_for_biden(self) -> float:
        return self.snapshots[-1].vote_share_biden


def audit_region(
    snapshots: Iterable[Snapshot],
    region: str = "REGION",
    *,
    strict: bool = False,
    logger: Optional[structlog.BoundLogger] = None,
) -> RegionAudit:
    """Ejecuta la auditoría completa de una región.

    English:
        Run the full audit for one region.

    Raises:
        InsufficientDataError: fewer than two snapshots.
        OrderingAmbiguityError: duplicate timestamps with ``strict=True``.
    """
    log = bind_context(logger or structlog.get_logger(), region=region)
    ordered = normalize_timeseries(snapshots, strict=strict)
    log = bind_context(log, snapshot_count=len(ordered))
    log.info("audit_started")

    records = comparative_time_series(ordered)
    report = aggregate(records, ordered[-1])

    for record in report.vote_drop_events:
        log.warning(
            "vote_drop_detected",
            amount=record.amount_dropped,
            previous=str(record.previous.timestamp),
            current=str(record.current.timestamp),
        )
    log.info(
        "audit_completed",
        winner=report.winner.value,
        total_vote_count_drop=report.total_vote_count_drop,
        vote_drop_events=len(report.vote_drop_events),
        lead_switch_events=len(report.lead_switch_events),
    )
    return RegionAudit(region=region, snapshots=ordered, records=records, report=report)


def audit_file(
    path: Path,
    settings: Optional[AuditSettings] = None,
    logger: Optional[structlog.BoundLogger] = None,
) -> RegionAudit:
    """/** Carga un archivo de región y lo audita. / Load a region file and audit it. **/"""
    settings = settings or AuditSettings()
    log = bind_context(logger or structlog.get_logger(), source_path=path)
    region, snapshots = load_region(path, settings)
    return audit_region(snapshots, region, strict=settings.STRICT_TIMESTAMPS, logger=log)
