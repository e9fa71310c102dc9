# core/templates.py
from __future__ import annotations

from enum import Enum
from pathlib import Path

from core.config import METRIC_COLUMNS, MONTHLY_COLUMNS, TEMPLATE_FILENAME_PATTERN


class TemplateKind(str, Enum):
    MONTHLY = "monthly"
    METRICS = "metrics"


_TEMPLATES = {
    TemplateKind.MONTHLY: (
        ",".join(MONTHLY_COLUMNS) + "\n"
        "Jan 2025,4.8,6.1,2025-01\n"
        "Feb 2025,4.7,6.0,2025-02\n"
        "Mar 2025,4.6,5.9,2025-03\n"
        "Apr 2025,4.5,5.8,2025-04\n"
        "May 2025,4.6,5.9,2025-05\n"
    ),
    TemplateKind.METRICS: (
        ",".join(METRIC_COLUMNS) + "\n"
        "Unemployment Rate,4.6,5.9\n"
        "Employment Rate,75.9,75.8\n"
        "Average Salary,2352,2750\n"
        "Youth Unemployment,14.0,14.8\n"
    ),
}


def template_csv(kind: TemplateKind | str) -> str:
    """Example upload file for `kind`, with the exact headers ingestion expects."""
    return _TEMPLATES[TemplateKind(kind)]


def template_filename(kind: TemplateKind | str) -> str:
    return TEMPLATE_FILENAME_PATTERN.format(kind=TemplateKind(kind).value)


def write_templates(out_dir: Path) -> list[Path]:
    out_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for kind in TemplateKind:
        path = out_dir / template_filename(kind)
        path.write_text(template_csv(kind), encoding="utf-8")
        written.append(path)
    return written
