"""Comparación de snapshots consecutivos.

Deriva, para cada par adyacente, el cambio de liderazgo, la caída del total
de votos y el cambio del total implícito por candidato.

English:
    Pairwise comparison of consecutive snapshots: lead switch, total-vote
    drop and per-candidate implied-total change.
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from tallywatch.core.errors import InsufficientDataError
from tallywatch.core.models import Candidate, ComparisonRecord, Snapshot

logger = logging.getLogger(__name__)


def lead(snapshot: Snapshot) -> Candidate:
    """Líder del snapshot; los empates favorecen a Biden.

    English:
        Leader at a snapshot. Trump leads only with a strictly greater share;
        ties go to Biden.
    """
    if snapshot.vote_share_trump > snapshot.vote_share_biden:
        return Candidate.TRUMP
    return Candidate.BIDEN


def implied_total(candidate: Candidate, snapshot: Snapshot) -> float:
    """/** Votos implícitos = fracción * total. / Implied votes = share * total. **/"""
    return snapshot.vote_share(candidate) * snapshot.total_votes


def compare_pair(previous: Snapshot, current: Snapshot) -> ComparisonRecord:
    """
    Compara dos snapshots consecutivos.

    Args:
        previous: Snapshot anterior en orden cronológico.
        current: Snapshot siguiente.

    Returns:
        ComparisonRecord con cambio de liderazgo, caída del total (<= 0) y
        cambio con signo del total implícito por candidato.

    English:
        Compare two consecutive snapshots.

    Args:
        previous: Earlier snapshot in chronological order.
        current: The following snapshot.

    Returns:
        ComparisonRecord holding the lead switch, the total drop (<= 0) and
        the signed implied-total change per candidate. Candidate changes are
        not clamped here.
    """
    current_lead = lead(current)
    lead_switched = current_lead if current_lead != lead(previous) else None
    amount_dropped = min(0, current.total_votes - previous.total_votes)

    return ComparisonRecord(
        previous=previous,
        current=current,
        lead_switched=lead_switched,
        amount_dropped=amount_dropped,
        trump_drop=implied_total(Candidate.TRUMP, current) - implied_total(Candidate.TRUMP, previous),
        biden_drop=implied_total(Candidate.BIDEN, current) - implied_total(Candidate.BIDEN, previous),
    )


def comparative_time_series(snapshots: Sequence[Snapshot]) -> List[ComparisonRecord]:
    """Un ComparisonRecord por cada par adyacente.

    English:
        One ComparisonRecord per adjacent pair, in chronological order.
        Expects an already normalized sequence of at least two snapshots.
    """
    if len(snapshots) < 2:
        raise InsufficientDataError(f"At least two snapshots are required, got {len(snapshots)}")

    records = [compare_pair(previous, current) for previous, current in zip(snapshots, snapshots[1:])]
    logger.debug("comparative_time_series records=%s", len(records))
    return records
