"""Errores del motor de auditoría.

English:
    Error taxonomy for the audit engine.
"""

from __future__ import annotations

from typing import Any, Iterable


class AuditError(Exception):
    """Error general de auditoría.

    English: Base error for every audit failure.
    """


class InsufficientDataError(AuditError):
    """No hay suficientes snapshots para comparar.

    English: Fewer snapshots than the operation needs.
    """


class SchemaError(AuditError, ValueError):
    """Snapshot con campos faltantes o fuera de dominio.

    English: Snapshot payload with missing or out-of-domain fields.
    """


class OrderingAmbiguityError(AuditError):
    """Dos snapshots comparten el mismo timestamp.

    English: Two or more snapshots share an identical timestamp.
    """

    def __init__(self, timestamps: Iterable[Any]) -> None:
        self.timestamps = list(timestamps)
        joined = ", ".join(str(value) for value in self.timestamps)
        super().__init__(f"Duplicate snapshot timestamps: {joined}")
