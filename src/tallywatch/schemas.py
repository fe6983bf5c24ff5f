"""Esquemas de entrada para series temporales estilo Edison.

Convierte el JSON crudo (``data.races[N].timeseries``) en ``Snapshot``
inmutables. El orden no se garantiza aquí; eso corresponde al normalizador.

English:
    Input schemas for Edison-style time-series payloads. Raw JSON
    (``data.races[N].timeseries``) becomes immutable ``Snapshot`` objects.
    Ordering is left to the normalizer.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import jsonschema
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from tallywatch.config import AuditSettings
from tallywatch.core.errors import SchemaError
from tallywatch.core.models import Snapshot

logger = logging.getLogger(__name__)

EDISON_PAYLOAD_SCHEMA = {
    "type": "object",
    "required": ["data"],
    "properties": {
        "data": {
            "type": "object",
            "required": ["races"],
            "properties": {
                "races": {
                    "type": "array",
                    "minItems": 1,
                    "items": {
                        "type": "object",
                        "required": ["timeseries"],
                        "properties": {"timeseries": {"type": "array"}},
                    },
                }
            },
        }
    },
}


class TimeseriesEntrySchema(BaseModel):
    """Esquema de una entrada de la serie temporal.

    English: Schema for one time-series entry. The singular ``vote_share``
    key is accepted as an alias of ``vote_shares``.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    votes: int = Field(ge=0)
    timestamp: str = Field(min_length=1)
    vote_shares: Dict[str, float] = Field(validation_alias=AliasChoices("vote_shares", "vote_share"))

    @field_validator("vote_shares")
    @classmethod
    def shares_in_unit_interval(cls, value: Dict[str, float]) -> Dict[str, float]:
        """Garantiza fracciones en [0, 1].

        English:
            Ensure every share lies in [0, 1].
        """
        for key, share in value.items():
            if not 0.0 <= share <= 1.0:
                raise ValueError(f"vote share for {key} must be within [0, 1], got {share}")
        return value


def parse_timestamp(value: str, timestamp_format: str) -> datetime:
    """/** Convierte el timestamp crudo a datetime. / Convert the raw timestamp into a datetime. **/"""
    cleaned = value.strip()
    if cleaned.endswith("Z"):
        cleaned = cleaned[:-1]
    try:
        return datetime.strptime(cleaned, timestamp_format)
    except ValueError as exc:
        raise SchemaError(f"Invalid timestamp {value!r}: expected format {timestamp_format}") from exc


def _decode_payload(data: Dict[str, Any] | str | bytes) -> Dict[str, Any]:
    """Parsea payload dict, str o bytes a dict JSON.

    English: Parse a dict, str or bytes payload into a JSON dict.
    """
    if isinstance(data, dict):
        payload: Any = data
    else:
        try:
            payload = json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise SchemaError(f"Payload is not valid JSON: {exc}") from exc
    try:
        jsonschema.validate(payload, EDISON_PAYLOAD_SCHEMA)
    except jsonschema.ValidationError as exc:
        raise SchemaError(f"Payload has no time series: {exc.message}") from exc
    return payload


def build_snapshot(entry: Dict[str, Any], settings: AuditSettings) -> Snapshot:
    """Valida una entrada y construye su Snapshot.

    English: Validate one entry and build its Snapshot.
    """
    try:
        model = TimeseriesEntrySchema.model_validate(entry)
    except ValidationError as exc:
        raise SchemaError(f"Invalid timeseries entry: {exc}") from exc

    missing = [key for key in (settings.TRUMP_KEY, settings.BIDEN_KEY) if key not in model.vote_shares]
    if missing:
        raise SchemaError(f"Timeseries entry is missing vote shares for: {', '.join(missing)}")

    return Snapshot(
        timestamp=parse_timestamp(model.timestamp, settings.TIMESTAMP_FORMAT),
        total_votes=model.votes,
        vote_share_trump=model.vote_shares[settings.TRUMP_KEY],
        vote_share_biden=model.vote_shares[settings.BIDEN_KEY],
    )


def parse_payload(
    data: Dict[str, Any] | str | bytes,
    settings: Optional[AuditSettings] = None,
) -> List[Snapshot]:
    """Convierte un payload Edison en snapshots (sin ordenar).

    English:
        Convert an Edison payload into snapshots, in payload order.

    Raises:
        SchemaError: malformed JSON, missing structure or invalid entries.
    """
    settings = settings or AuditSettings()
    payload = _decode_payload(data)
    races = payload["data"]["races"]
    if settings.RACE_INDEX >= len(races):
        raise SchemaError(f"Race index {settings.RACE_INDEX} out of range ({len(races)} races)")

    entries = races[settings.RACE_INDEX]["timeseries"]
    snapshots: List[Snapshot] = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise SchemaError(f"Timeseries entry {index} must be an object")
        try:
            snapshots.append(build_snapshot(entry, settings))
        except SchemaError as exc:
            raise SchemaError(f"Entry {index}: {exc}") from exc
    logger.debug("payload_parsed entries=%s", len(snapshots))
    return snapshots


def load_region(path: Path, settings: Optional[AuditSettings] = None) -> Tuple[str, List[Snapshot]]:
    """Lee un archivo de región; el nombre es el stem en mayúsculas.

    English: Read one region file. The region name is the upper-cased stem.
    """
    path = Path(path)
    region = path.stem.upper()
    return region, parse_payload(path.read_bytes(), settings)
