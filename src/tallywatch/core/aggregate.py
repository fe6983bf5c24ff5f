"""Agregación de comparaciones en un reporte por región.

English:
    Reduce the ComparisonRecord sequence into an AggregateReport.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from tallywatch.core.compare import lead
from tallywatch.core.errors import InsufficientDataError
from tallywatch.core.models import AggregateReport, Candidate, ComparisonRecord, Snapshot

logger = logging.getLogger(__name__)


def times_total_vote_count_dropped(records: Sequence[ComparisonRecord]) -> List[ComparisonRecord]:
    """/** Registros donde cayó el total. / Records where the total dropped. **/"""
    return [record for record in records if record.amount_dropped != 0]


def times_lead_switched(records: Sequence[ComparisonRecord]) -> List[ComparisonRecord]:
    """/** Registros con cambio de líder. / Records with a lead switch. **/"""
    return [record for record in records if record.lead_switched is not None]


def total_vote_count_drop(records: Sequence[ComparisonRecord]) -> int:
    return sum(record.amount_dropped for record in records)


def vote_drop_total_for_candidate(records: Sequence[ComparisonRecord], candidate: Candidate) -> float:
    """Suma de caídas del candidato en intervalos donde cayó el total.

    English:
        Sum of the candidate's implied-total change, counted only over the
        intervals where the total vote count also dropped.
    """
    return sum(record.drop_for(candidate) for record in times_total_vote_count_dropped(records))


def aggregate(
    records: Sequence[ComparisonRecord],
    final_snapshot: Optional[Snapshot] = None,
) -> AggregateReport:
    """Construye el AggregateReport de una región.

    Args:
        records: Comparaciones en orden cronológico.
        final_snapshot: Último snapshot normalizado; por defecto el
            ``current`` del último registro.

    English:
        Build the AggregateReport for one region.

    Args:
        records: Comparisons in chronological order.
        final_snapshot: Last normalized snapshot; defaults to the ``current``
            snapshot of the last record.

    Raises:
        InsufficientDataError: no records and no final snapshot, so no winner
            can be determined.
    """
    if final_snapshot is None:
        if not records:
            raise InsufficientDataError("Cannot determine a winner without snapshots")
        final_snapshot = records[-1].current

    vote_drop_events = times_total_vote_count_dropped(records)
    candidate_totals: Dict[Candidate, float] = {
        candidate: vote_drop_total_for_candidate(records, candidate) for candidate in Candidate
    }

    report = AggregateReport(
        winner=lead(final_snapshot),
        total_vote_count_drop=total_vote_count_drop(records),
        candidate_vote_drop_total=candidate_totals,
        lead_switch_events=times_lead_switched(records),
        vote_drop_events=vote_drop_events,
    )
    logger.debug(
        "aggregate winner=%s total_drop=%s drop_events=%s lead_switches=%s",
        report.winner.value,
        report.total_vote_count_drop,
        len(report.vote_drop_events),
        len(report.lead_switch_events),
    )
    return report
