# core/ingest.py
"""
Upload ingestion: turn an uploaded CSV/Excel file into row mappings, classify
the rows by the keys of the first row and merge the result into a
`DashboardState`.

Recognised shapes:
  - monthly trend:  month, Cyprus, EU, date   -> replaces the trend wholesale
  - metrics:        metric, cyprus_value, eu_value -> merged field by field
  - anything else:  kept as an opaque "general" upload
"""

from __future__ import annotations

import io
import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

import pandas as pd

from core.config import ALLOWED_EXTENSIONS, METRIC_COLUMNS, MONTHLY_REQUIRED
from core.store import DashboardState, UploadStatus

logger = logging.getLogger(__name__)


class IngestError(ValueError):
    """Upload rejected before it reached the store."""


class UnsupportedFileTypeError(IngestError):
    pass


class UploadParseError(IngestError):
    pass


class UploadKind(Enum):
    MONTHLY_TREND = "monthly"
    METRIC_SET = "metrics"
    GENERAL = "general"
    UNRECOGNIZED = "unrecognized"


# Checked in order: "youth unemployment" must not fall into the plain
# unemployment family, and "unemployment" contains "employment".
METRIC_FAMILIES: list[tuple[tuple[str, ...], str]] = [
    (("youth",), "youthUnemployment"),
    (("unemployment",), "unemploymentRate"),
    (("employment",), "employmentRate"),
    (("salary", "wage"), "averageSalary"),
]


@dataclass(frozen=True)
class MetricUpdate:
    key: str
    cyprus: float
    eu: float


@dataclass
class Classification:
    kind: UploadKind
    payload: Any = None
    skipped: int = 0


@dataclass
class IngestResult:
    status: UploadStatus
    kind: UploadKind = UploadKind.UNRECOGNIZED
    rows: int = 0
    merged: int = 0
    skipped: int = 0
    message: str = ""
    columns: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status.is_success


def file_extension(filename: str) -> str:
    return Path(filename or "").suffix.lower().lstrip(".")


def match_metric_family(label: str) -> Optional[str]:
    """
    Map a free-text metric label to a MetricSet key by substring. Families are
    tried in METRIC_FAMILIES order and the first match wins.
    """
    text = (label or "").strip().lower()
    if not text:
        return None
    for needles, key in METRIC_FAMILIES:
        if any(n in text for n in needles):
            return key
    return None


def _to_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        out = float(str(value).strip()) if isinstance(value, str) else float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(out):
        return None
    return out


def read_upload(filename: str, data: bytes) -> list[dict[str, Any]]:
    """
    Parse file bytes into a list of row mappings (header row required).
    Excel workbooks are read from the first sheet only.
    """
    ext = file_extension(filename)
    if ext not in ALLOWED_EXTENSIONS:
        raise UnsupportedFileTypeError(
            f"Unsupported file type '.{ext}'. Allowed: {', '.join(ALLOWED_EXTENSIONS)}"
        )

    try:
        if ext == "csv":
            df = pd.read_csv(io.BytesIO(data))
        else:
            df = pd.read_excel(io.BytesIO(data), sheet_name=0)
    except Exception as e:
        raise UploadParseError(f"Could not read {filename}: {e}") from e

    return frame_to_rows(df)


def frame_to_rows(df: pd.DataFrame) -> list[dict[str, Any]]:
    if df.empty:
        return []
    df = df.rename(columns=lambda c: str(c))
    df = df.astype(object).where(pd.notna(df), None)
    return df.to_dict(orient="records")


def classify_rows(rows: Sequence[Mapping[str, Any]]) -> Classification:
    """
    Classify an upload by the keys of its first row. Later rows are assumed
    to share that shape.
    """
    if not rows or not isinstance(rows[0], Mapping):
        return Classification(UploadKind.UNRECOGNIZED)

    keys = set(rows[0].keys())

    if all(k in keys for k in MONTHLY_REQUIRED):
        return Classification(UploadKind.MONTHLY_TREND, payload=[dict(r) for r in rows])

    if all(k in keys for k in METRIC_COLUMNS):
        updates: list[MetricUpdate] = []
        skipped = 0
        for row in rows:
            key = match_metric_family(str(row.get("metric") or ""))
            cy = _to_float(row.get("cyprus_value"))
            eu = _to_float(row.get("eu_value"))
            if key is None or cy is None or eu is None:
                logger.debug("skipping metrics row %r", dict(row))
                skipped += 1
                continue
            updates.append(MetricUpdate(key=key, cyprus=cy, eu=eu))
        return Classification(UploadKind.METRIC_SET, payload=updates, skipped=skipped)

    return Classification(UploadKind.GENERAL, payload=[dict(r) for r in rows])


def apply_classification(state: DashboardState, classification: Classification) -> IngestResult:
    kind = classification.kind
    payload = classification.payload

    if kind == UploadKind.MONTHLY_TREND:
        state.replace_trend(payload)
        result = IngestResult(UploadStatus.SUCCESS_MONTHLY, kind, rows=len(payload), merged=len(payload))
    elif kind == UploadKind.METRIC_SET:
        merged = 0
        for upd in payload:
            if state.merge_metric("cyprus", upd.key, upd.cyprus):
                merged += 1
            if state.merge_metric("eu", upd.key, upd.eu):
                merged += 1
        result = IngestResult(
            UploadStatus.SUCCESS_METRICS,
            kind,
            rows=len(payload) + classification.skipped,
            merged=merged,
            skipped=classification.skipped,
        )
    elif kind == UploadKind.GENERAL:
        state.set_general_upload(payload)
        columns = list(payload[0].keys()) if payload else []
        result = IngestResult(UploadStatus.SUCCESS_GENERAL, kind, rows=len(payload), columns=columns)
    else:
        result = IngestResult(UploadStatus.ERROR, kind, message="No rows to import.")

    state.set_status(result.status, result.message)
    return result


def ingest_rows(state: DashboardState, rows: Sequence[Mapping[str, Any]]) -> IngestResult:
    """Classify already-parsed rows and merge them into the store."""
    classification = classify_rows(rows)
    result = apply_classification(state, classification)
    logger.info(
        "upload classified as %s: rows=%d merged=%d skipped=%d",
        classification.kind.value,
        result.rows,
        result.merged,
        result.skipped,
    )
    return result


def ingest_upload(state: DashboardState, filename: str, data: bytes) -> IngestResult:
    """
    Upload boundary: parse, classify and merge. Never raises for bad input;
    errors are reported through the result and the store status while the
    datasets stay untouched.
    """
    try:
        rows = read_upload(filename, data)
    except UnsupportedFileTypeError as e:
        logger.warning("rejected upload %s: %s", filename, e)
        state.set_status(UploadStatus.ERROR, str(e))
        return IngestResult(UploadStatus.ERROR, message=str(e))
    except UploadParseError as e:
        logger.exception("failed to parse upload %s", filename)
        state.set_status(UploadStatus.ERROR, str(e))
        return IngestResult(UploadStatus.ERROR, message=str(e))

    if not rows:
        msg = f"{filename} contains no data rows."
        logger.warning("rejected upload %s: no data rows", filename)
        state.set_status(UploadStatus.ERROR, msg)
        return IngestResult(UploadStatus.ERROR, message=msg)

    return ingest_rows(state, rows)
