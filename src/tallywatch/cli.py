"""
======================== ÍNDICE / INDEX ========================
1. Descripción general / Overview
2. Componentes principales / Main components
3. Notas de mantenimiento / Maintenance notes

======================== ESPAÑOL ========================
Archivo: `src/tallywatch/cli.py`.
Este módulo forma parte de Tallywatch y está documentado para facilitar
la navegación, mantenimiento y auditoría técnica.

Componentes detectados:
  - main
  - audit

Notas:
- Mantener esta cabecera sincronizada con cambios estructurales del archivo.
- Priorizar claridad operativa y trazabilidad del comportamiento.

======================== ENGLISH ========================
File: `src/tallywatch/cli.py`.
This module is part of Tallywatch and is documented to improve
navigation, maintenance, and technical auditability.

Detected components:
  - main
  - audit

Notes:
- Keep this header in sync with structural changes in the file.
- Prioritize operational clarity and behavior traceability.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import typer

from tallywatch.config import VALID_LOG_LEVELS, load_config
from tallywatch.core.errors import AuditError
from tallywatch.logging import bind_context, setup_logging
from tallywatch.pipeline import audit_file
from tallywatch.reports import ReportFormatter

app = typer.Typer(help="Tallywatch vote-count audit CLI")


@app.callback()
def main() -> None:
    """Interfaz de línea de comandos de Tallywatch.

    English: Tallywatch command line interface.
    """


@app.command()
def audit(
    path: Path = typer.Argument(..., help="Edison-style JSON file for one region."),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML settings file."),
    strict: Optional[bool] = typer.Option(None, "--strict/--no-strict", help="Reject duplicate timestamps."),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override LOG_LEVEL."),
    summary: bool = typer.Option(False, "--summary", help="Print a short summary instead of the full report."),
) -> None:
    """Audita la serie temporal de una región.

    English: Audit one region's vote-count time series.
    """
    try:
        settings = load_config(config)
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    updates: Dict[str, Any] = {}
    if strict is not None:
        updates["STRICT_TIMESTAMPS"] = strict
    if log_level:
        if log_level.upper() not in VALID_LOG_LEVELS:
            typer.echo(f"Error: unknown log level {log_level!r}", err=True)
            raise typer.Exit(code=1)
        updates["LOG_LEVEL"] = log_level.upper()
    if updates:
        settings = settings.model_copy(update=updates)

    logger = bind_context(setup_logging(settings.LOG_LEVEL, settings.LOG_DIR), source_path=path)
    try:
        result = audit_file(path, settings, logger=logger)
    except (AuditError, ValueError, OSError) as exc:
        logger.error("audit_failed", error=str(exc), error_type=type(exc).__name__)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    formatter = ReportFormatter(result)
    if summary:
        typer.echo("\n".join(formatter.summary()))
    else:
        typer.echo(formatter.render())


if __name__ == "__main__":
    app()
