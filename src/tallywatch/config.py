"""
======================== ÍNDICE / INDEX ========================
1. Descripción general / Overview
2. Componentes principales / Main components
3. Notas de mantenimiento / Maintenance notes

======================== ESPAÑOL ========================
Archivo: `src/tallywatch/config.py`.
Este módulo forma parte de Tallywatch y está documentado para facilitar
la navegación, mantenimiento y auditoría técnica.

Componentes detectados:
  - AuditSettings
  - load_yaml_mapping
  - load_config

Notas:
- Mantener esta cabecera sincronizada con cambios estructurales del archivo.
- Priorizar claridad operativa y trazabilidad del comportamiento.

======================== ENGLISH ========================
File: `src/tallywatch/config.py`.
This module is part of Tallywatch and is documented to improve
navigation, maintenance, and technical auditability.

Detected components:
  - AuditSettings
  - load_yaml_mapping
  - load_config

Notes:
- Keep this header in sync with structural changes in the file.
- Prioritize operational clarity and behavior traceability.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

_ENV_PATH = Path(".env")
_ENV_LOCAL_PATH = Path(".env.local")
load_dotenv(_ENV_PATH, override=False)
load_dotenv(_ENV_LOCAL_PATH, override=False)

VALID_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class AuditSettings(BaseSettings):
    """Variables de entorno, archivo .env y YAML para Tallywatch.

    English: Environment variables, .env file and YAML settings for Tallywatch.
    Environment values take precedence over values passed from YAML.
    """

    model_config = SettingsConfigDict(
        env_prefix="TALLYWATCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[Path] = None
    STRICT_TIMESTAMPS: bool = False
    TIMESTAMP_FORMAT: str = "%Y-%m-%dT%H:%M:%S"
    TRUMP_KEY: str = Field(default="trumpd", min_length=1)
    BIDEN_KEY: str = Field(default="bidenj", min_length=1)
    RACE_INDEX: int = Field(default=0, ge=0)

    @field_validator("LOG_LEVEL")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        """/** Normaliza y valida el nivel de log. / Normalize and validate the log level. **/"""
        level = value.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {sorted(VALID_LOG_LEVELS)}")
        return level

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return env_settings, dotenv_settings, init_settings, file_secret_settings


def load_yaml_mapping(path: Path) -> Dict[str, Any]:
    """Carga un mapa YAML o lanza un error orientado al usuario.

    English: Load a YAML mapping or raise a user-facing error.
    """
    if not path.exists():
        raise FileNotFoundError(f"Falta {path.as_posix()} (Missing {path.as_posix()}).")
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"{path.name} tiene errores de sintaxis YAML ({path.name} has YAML syntax errors).") from exc
    if not isinstance(raw, dict):
        raise ValueError(f"{path.name} debe ser un mapa YAML ({path.name} must be a YAML mapping).")
    return raw


def load_config(config_path: Optional[Path] = None) -> AuditSettings:
    """/** Carga y valida configuración, fallando con detalle. / Load and validate configuration, failing with details. **/"""
    overrides: Dict[str, Any] = {}
    if config_path is not None:
        overrides = {str(key).upper(): value for key, value in load_yaml_mapping(Path(config_path)).items()}
    try:
        settings = AuditSettings(**overrides)
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration: {exc}") from exc
    logging.getLogger(__name__).debug("Configuración cargada (config loaded) path=%s", config_path)
    return settings
