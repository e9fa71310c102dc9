# core/config.py
from __future__ import annotations

APP_TITLE = "Cyprus & EU Labour Market"
VERSION = "0.1.0"

DEFAULT_LANGUAGE = "en"
SUPPORTED_LANGUAGES = ("en", "el")

ALLOWED_EXTENSIONS = ("csv", "xlsx", "xls")

REGIONS = ("cyprus", "eu")
METRIC_KEYS = (
    "unemploymentRate",
    "employmentRate",
    "averageSalary",
    "youthUnemployment",
    "labourForceParticipation",
)

# Column sets the normalizer recognises (first-row key presence).
MONTHLY_COLUMNS = ("month", "Cyprus", "EU", "date")
MONTHLY_REQUIRED = ("month", "Cyprus")
METRIC_COLUMNS = ("metric", "cyprus_value", "eu_value")

TEMPLATE_FILENAME_PATTERN = "{kind}_data_template.csv"
EXPORT_FILENAME = "labour_market_dashboard.xlsx"
