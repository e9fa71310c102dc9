# core/export.py
from __future__ import annotations

import io

import pandas as pd

from core.config import METRIC_KEYS
from core.datasets import EMPLOYMENT_BY_GENDER, SECTORAL_EMPLOYMENT, WAGES_BY_SECTOR
from core.store import DashboardState


def metrics_frame(state: DashboardState) -> pd.DataFrame:
    """Cyprus vs EU metrics, one row per metric key."""
    cyprus = state.metric_set("cyprus")
    eu_set = state.metric_set("eu")
    rows = []
    for key in METRIC_KEYS:
        cy = cyprus.get(key)
        eu = eu_set.get(key)
        diff = None if cy is None or eu is None else round(cy - eu, 2)
        rows.append({"metric": key, "cyprus": cy, "eu": eu, "difference": diff})
    return pd.DataFrame(rows, columns=["metric", "cyprus", "eu", "difference"])


def trend_frame(state: DashboardState) -> pd.DataFrame:
    return pd.DataFrame(state.monthly_trend)


def export_workbook(state: DashboardState) -> bytes:
    """
    Current dashboard data as an .xlsx workbook, one sheet per dataset.
    The general upload sheet is only written when one exists.
    """
    sheets = {
        "monthly_trend": trend_frame(state),
        "metrics": metrics_frame(state),
        "employment_by_gender": pd.DataFrame(EMPLOYMENT_BY_GENDER),
        "sectoral": pd.DataFrame(SECTORAL_EMPLOYMENT),
        "wages": pd.DataFrame(WAGES_BY_SECTOR),
    }
    if state.general_upload:
        sheets["general_upload"] = pd.DataFrame(state.general_upload)

    buf = io.BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        for name, df in sheets.items():
            df.to_excel(writer, sheet_name=name, index=False)
    return buf.getvalue()
