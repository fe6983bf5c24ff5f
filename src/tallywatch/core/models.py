"""
======================== ÍNDICE / INDEX ========================
1. Descripción general / Overview
2. Componentes principales / Main components
3. Notas de mantenimiento / Maintenance notes

======================== ESPAÑOL ========================
Archivo: `src/tallywatch/core/models.py`.
Este módulo forma parte de Tallywatch y está documentado para facilitar
la navegación, mantenimiento y auditoría técnica.

Componentes detectados:
  - Candidate
  - Snapshot
  - ComparisonRecord
  - AggregateReport

Notas:
- Mantener esta cabecera sincronizada con cambios estructurales del archivo.
- Priorizar claridad operativa y trazabilidad del comportamiento.

======================== ENGLISH ========================
File: `src/tallywatch/core/models.py`.
This module is part of Tallywatch and is documented to improve
navigation, maintenance, and technical auditability.

Detected components:
  - Candidate
  - Snapshot
  - ComparisonRecord
  - AggregateReport

Notes:
- Keep this header in sync with structural changes in the file.
- Prioritize operational clarity and behavior traceability.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional


class Candidate(str, Enum):
    """Identificador de candidato auditado.

    English:
        Audited candidate identifier.
    """

    TRUMP = "trump"
    BIDEN = "biden"

    @property
    def display_name(self) -> str:
        """Nombre para reportes. / Name used in reports."""
        return self.value.capitalize()


@dataclass(frozen=True)
class Snapshot:
    """Observación de conteo de votos en un instante.

    Attributes:
        timestamp (datetime): Instante del reporte.
        total_votes (int): Votos totales contabilizados en la región.
        vote_share_trump (float): Fracción de votos para Trump, en [0, 1].
        vote_share_biden (float): Fracción de votos para Biden, en [0, 1].

    English:
        One vote-count observation at a reporting instant.

    Attributes:
        timestamp (datetime): Reporting instant.
        total_votes (int): Total votes counted in the region.
        vote_share_trump (float): Trump's share of total_votes, in [0, 1].
        vote_share_biden (float): Biden's share of total_votes, in [0, 1].
    """

    timestamp: datetime
    total_votes: int
    vote_share_trump: float
    vote_share_biden: float

    def vote_share(self, candidate: Candidate) -> float:
        """Devuelve la fracción de votos canónica del candidato.

        English:
            Return the candidate's canonical vote share. Both the "current"
            view (``vote_share``) and the time-series view (``vote_shares``)
            of the source data resolve to this one value.
        """
        if candidate is Candidate.TRUMP:
            return self.vote_share_trump
        return self.vote_share_biden


@dataclass(frozen=True)
class ComparisonRecord:
    """Comparación entre dos snapshots consecutivos.

    Attributes:
        previous (Snapshot): Snapshot anterior.
        current (Snapshot): Snapshot actual.
        lead_switched (Optional[Candidate]): Nuevo líder si el liderazgo cambió.
        amount_dropped (int): Caída del total de votos (<= 0).
        trump_drop (float): Cambio con signo del total implícito de Trump.
        biden_drop (float): Cambio con signo del total implícito de Biden.

    English:
        Comparison between two consecutive snapshots.

    Attributes:
        previous (Snapshot): Previous snapshot.
        current (Snapshot): Current snapshot.
        lead_switched (Optional[Candidate]): New leader when the lead changed.
        amount_dropped (int): Drop in total votes (<= 0).
        trump_drop (float): Signed change of Trump's implied total.
        biden_drop (float): Signed change of Biden's implied total.
    """

    previous: Snapshot
    current: Snapshot
    lead_switched: Optional[Candidate]
    amount_dropped: int
    trump_drop: float
    biden_drop: float

    def drop_for(self, candidate: Candidate) -> float:
        """Cambio del total implícito del candidato. / Candidate's implied-total change."""
        if candidate is Candidate.TRUMP:
            return self.trump_drop
        return self.biden_drop

    @property
    def total_dropped(self) -> bool:
        return self.amount_dropped != 0


@dataclass(frozen=True)
class AggregateReport:
    """Resumen de auditoría de una región.

    Attributes:
        winner (Candidate): Líder en el último snapshot.
        total_vote_count_drop (int): Suma de caídas del total (<= 0).
        candidate_vote_drop_total (Dict[Candidate, float]): Suma de caídas por
            candidato, solo en intervalos donde el total también cayó.
        lead_switch_events (List[ComparisonRecord]): Cambios de liderazgo.
        vote_drop_events (List[ComparisonRecord]): Caídas del total.

    English:
        Audit summary for one region.

    Attributes:
        winner (Candidate): Leader at the final snapshot.
        total_vote_count_drop (int): Sum of total-count drops (<= 0).
        candidate_vote_drop_total (Dict[Candidate, float]): Per-candidate drop
            sum, only over intervals where the total also dropped.
        lead_switch_events (List[ComparisonRecord]): Lead switches.
        vote_drop_events (List[ComparisonRecord]): Total-count drops.
    """

    winner: Candidate
    total_vote_count_drop: int
    candidate_vote_drop_total: Dict[Candidate, float] = field(default_factory=dict)
    lead_switch_events: List[ComparisonRecord] = field(default_factory=list)
    vote_drop_events: List[ComparisonRecord] = field(default_factory=list)

    @property
    def did_total_vote_count_drop(self) -> bool:
        return self.total_vote_count_drop < 0

    def did_candidate_vote_count_drop(self, candidate: Candidate) -> bool:
        return self.candidate_vote_drop_total.get(candidate, 0.0) < 0

    @property
    def did_trump_vote_count_drop(self) -> bool:
        return self.did_candidate_vote_count_drop(Candidate.TRUMP)

    @property
    def did_biden_vote_count_drop(self) -> bool:
        return self.did_candidate_vote_count_drop(Candidate.BIDEN)

    def candidate_drop_more_than(self, candidate: Candidate, other: Candidate) -> bool:
        """Indica si ``candidate`` perdió más votos implícitos que ``other``.

        English:
            True when ``candidate``'s drop total is more negative than
            ``other``'s.
        """
        return self.candidate_vote_drop_total.get(candidate, 0.0) < self.candidate_vote_drop_total.get(other, 0.0)

    @property
    def biden_drop_more_than_trump(self) -> bool:
        return self.candidate_drop_more_than(Candidate.BIDEN, Candidate.TRUMP)
