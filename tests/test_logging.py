"""Pruebas de la configuración de logging.

Tests for logging setup.
"""

from __future__ import annotations

from pathlib import Path

from tallywatch.logging import bind_context, setup_logging


def test_setup_logging_creates_log_directory(tmp_path: Path) -> None:
    log_dir = tmp_path / "logs"

    logger = setup_logging("INFO", log_dir)

    assert log_dir.is_dir()
    assert hasattr(logger, "info")


def test_setup_logging_without_directory() -> None:
    logger = setup_logging("DEBUG")

    assert hasattr(logger, "bind")


def test_bind_context_only_binds_present_values() -> None:
    class RecordingLogger:
        def __init__(self) -> None:
            self.bound: dict = {}

        def bind(self, **kwargs):
            self.bound = kwargs
            return self

    logger = RecordingLogger()

    bind_context(logger, region="GEORGIA", source_path=Path("georgia.json"), snapshot_count=0)

    assert logger.bound == {"region": "GEORGIA", "source_path": "georgia.json", "snapshot_count": 0}

    bind_context(logger)

    assert logger.bound == {}
