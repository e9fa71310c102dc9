# core/store.py
"""
In-memory dataset store for the dashboard.

One `DashboardState` lives per browser session (see `app/state.py`); nothing is
persisted, so a reload starts again from the seeded defaults.
"""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from core.config import METRIC_KEYS, REGIONS
from core.datasets import default_metrics, default_monthly_trend


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class UploadStatus(Enum):
    """Outcome of the most recent upload."""
    NONE = ""
    SUCCESS_MONTHLY = "success-monthly"
    SUCCESS_METRICS = "success-metrics"
    SUCCESS_GENERAL = "success-general"
    ERROR = "error"

    @property
    def is_success(self) -> bool:
        return self.value.startswith("success")


@dataclass
class DashboardState:
    monthly_trend: list[dict[str, Any]] = field(default_factory=default_monthly_trend)
    metrics: dict[str, dict[str, float]] = field(default_factory=default_metrics)
    general_upload: Optional[list[dict[str, Any]]] = None
    upload_status: UploadStatus = UploadStatus.NONE
    status_message: str = ""
    last_updated: Optional[datetime] = None

    @classmethod
    def seeded(cls) -> "DashboardState":
        return cls()

    # ---- accessors ----
    def get_metric(self, region: str, key: str) -> Optional[float]:
        return self.metrics.get(region, {}).get(key)

    def metric_set(self, region: str) -> dict[str, float]:
        if region not in REGIONS:
            raise KeyError(f"unknown region: {region}")
        return dict(self.metrics.get(region, {}))

    def snapshot(self) -> dict[str, Any]:
        """Deep copy of the datasets (status fields excluded)."""
        return {
            "monthly_trend": copy.deepcopy(self.monthly_trend),
            "metrics": copy.deepcopy(self.metrics),
            "general_upload": copy.deepcopy(self.general_upload),
        }

    # ---- mutators ----
    def replace_trend(self, rows: list[dict[str, Any]]) -> None:
        self.monthly_trend = list(rows)
        self._touch()

    def merge_metric(self, region: str, key: str, value: float) -> bool:
        """
        Merge a single metric value. Unknown regions/keys and non-finite values
        are dropped; returns True when the value was stored.
        """
        if region not in REGIONS or key not in METRIC_KEYS:
            return False
        try:
            value = float(value)
        except (TypeError, ValueError):
            return False
        if not math.isfinite(value):
            return False
        self.metrics.setdefault(region, {})[key] = value
        self._touch()
        return True

    def set_general_upload(self, rows: list[dict[str, Any]]) -> None:
        self.general_upload = list(rows)
        self._touch()

    def set_status(self, status: UploadStatus, message: str = "") -> None:
        self.upload_status = status
        self.status_message = message

    def reset(self) -> None:
        self.monthly_trend = default_monthly_trend()
        self.metrics = default_metrics()
        self.general_upload = None
        self.upload_status = UploadStatus.NONE
        self.status_message = ""
        self.last_updated = None

    def _touch(self) -> None:
        self.last_updated = utc_now()
