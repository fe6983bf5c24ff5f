"""
======================== ÍNDICE / INDEX ========================
1. Descripción general / Overview
2. Componentes principales / Main components
3. Notas de mantenimiento / Maintenance notes

======================== ESPAÑOL ========================
Archivo: `src/tallywatch/core/normalize.py`.
Este módulo forma parte de Tallywatch y está documentado para facilitar
la navegación, mantenimiento y auditoría técnica.

Componentes detectados:
  - find_duplicate_timestamps
  - normalize_timeseries

Notas:
- Mantener esta cabecera sincronizada con cambios estructurales del archivo.
- Priorizar claridad operativa y trazabilidad del comportamiento.

======================== ENGLISH ========================
File: `src/tallywatch/core/normalize.py`.
This module is part of Tallywatch and is documented to improve
navigation, maintenance, and technical auditability.

Detected components:
  - find_duplicate_timestamps
  - normalize_timeseries

Notes:
- Keep this header in sync with structural changes in the file.
- Prioritize operational clarity and behavior traceability.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Iterable, List

from tallywatch.core.errors import InsufficientDataError, OrderingAmbiguityError
from tallywatch.core.models import Snapshot

logger = logging.getLogger(__name__)


def find_duplicate_timestamps(snapshots: Iterable[Snapshot]) -> List[Any]:
    """/** Timestamps repetidos en orden cronológico. / Repeated timestamps in chronological order. **/"""
    counts = Counter(snapshot.timestamp for snapshot in snapshots)
    return sorted(timestamp for timestamp, count in counts.items() if count > 1)


def normalize_timeseries(snapshots: Iterable[Snapshot], *, strict: bool = False) -> List[Snapshot]:
    """Ordena snapshots cronológicamente.

    El orden es estable: snapshots con el mismo timestamp conservan el orden
    de entrada. Con ``strict=True`` los timestamps repetidos se rechazan.

    English:
        Sort snapshots ascending by timestamp.

        The sort is stable, so snapshots sharing a timestamp keep their input
        order. With ``strict=True`` duplicate timestamps raise
        ``OrderingAmbiguityError`` instead.
    """
    items = list(snapshots)
    if not items:
        raise InsufficientDataError("At least one snapshot is required")

    duplicates = find_duplicate_timestamps(items)
    if duplicates:
        if strict:
            raise OrderingAmbiguityError(duplicates)
        logger.warning("duplicate_snapshot_timestamps count=%s first=%s", len(duplicates), duplicates[0])

    return sorted(items, key=lambda snapshot: snapshot.timestamp)
