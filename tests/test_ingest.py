import math

import pytest

from core.ingest import (
    Classification,
    UploadKind,
    apply_classification,
    classify_rows,
    ingest_rows,
    ingest_upload,
    match_metric_family,
)
from core.store import DashboardState, UploadStatus


MONTHLY_ROWS = [
    {"month": "Jun 2025", "Cyprus": 4.4, "EU": 5.8, "date": "2025-06"},
    {"month": "Jul 2025", "Cyprus": 4.3, "EU": 5.7, "date": "2025-07"},
]


def test_monthly_upload_replaces_trend_verbatim():
    state = DashboardState.seeded()
    result = ingest_rows(state, MONTHLY_ROWS)

    assert result.status == UploadStatus.SUCCESS_MONTHLY
    assert result.kind == UploadKind.MONTHLY_TREND
    assert state.monthly_trend == MONTHLY_ROWS
    assert state.upload_status == UploadStatus.SUCCESS_MONTHLY
    assert state.last_updated is not None


def test_monthly_classification_needs_only_month_and_cyprus():
    rows = [{"month": "Jan", "Cyprus": "bad value"}]
    classification = classify_rows(rows)
    assert classification.kind == UploadKind.MONTHLY_TREND
    assert classification.payload == rows


def test_metrics_upload_merges_matching_row():
    state = DashboardState.seeded()
    rows = [{"metric": "Unemployment Rate", "cyprus_value": "4.6", "eu_value": "5.9"}]
    state.metrics["cyprus"]["unemploymentRate"] = 1.0
    state.metrics["eu"]["unemploymentRate"] = 1.0

    result = ingest_rows(state, rows)

    assert result.status == UploadStatus.SUCCESS_METRICS
    assert state.metrics["cyprus"]["unemploymentRate"] == 4.6
    assert state.metrics["eu"]["unemploymentRate"] == 5.9
    assert result.merged == 2


def test_unknown_metric_row_leaves_metrics_unchanged():
    state = DashboardState.seeded()
    before = state.snapshot()

    result = ingest_rows(state, [{"metric": "Unknown Thing", "cyprus_value": "1", "eu_value": "2"}])

    assert result.status == UploadStatus.SUCCESS_METRICS
    assert result.skipped == 1
    assert state.snapshot() == before


def test_metrics_rows_with_non_numeric_values_are_skipped():
    state = DashboardState.seeded()
    before = state.snapshot()
    rows = [
        {"metric": "Employment Rate", "cyprus_value": "n/a", "eu_value": ""},
        {"metric": "Average Salary", "cyprus_value": None, "eu_value": float("nan")},
        {"metric": "Average Wage", "cyprus_value": "inf", "eu_value": "abc"},
    ]

    result = ingest_rows(state, rows)

    assert result.skipped == 3
    assert state.snapshot() == before


def test_metrics_row_missing_one_region_value_is_skipped():
    state = DashboardState.seeded()
    before = state.snapshot()
    rows = [
        {"metric": "Unemployment Rate", "cyprus_value": "9.9", "eu_value": None},
        {"metric": "employment rate", "cyprus_value": " 77.1 ", "eu_value": "x"},
    ]

    result = ingest_rows(state, rows)

    assert result.skipped == 2
    assert result.merged == 0
    assert state.snapshot() == before


def test_metrics_values_are_stripped_before_parsing():
    state = DashboardState.seeded()
    ingest_rows(state, [{"metric": "employment rate", "cyprus_value": " 77.1 ", "eu_value": "76.0 "}])

    assert state.get_metric("cyprus", "employmentRate") == 77.1
    assert state.get_metric("eu", "employmentRate") == 76.0


def test_metrics_mixed_rows_commit_partial_merge():
    state = DashboardState.seeded()
    rows = [
        {"metric": "  YOUTH Unemployment ", "cyprus_value": 13.2, "eu_value": 14.5},
        {"metric": "Gross Monthly Wage", "cyprus_value": "2400", "eu_value": "2800"},
        {"metric": "Inflation", "cyprus_value": "2.1", "eu_value": "2.4"},
    ]

    result = ingest_rows(state, rows)

    assert result.rows == 3
    assert result.skipped == 1
    assert state.get_metric("cyprus", "youthUnemployment") == 13.2
    assert state.get_metric("eu", "averageSalary") == 2800.0
    # youth row must not overwrite the headline rate
    assert state.get_metric("cyprus", "unemploymentRate") == 4.6


def test_metric_values_are_always_finite_after_ingest():
    state = DashboardState.seeded()
    ingest_rows(state, [{"metric": "Unemployment", "cyprus_value": "nan", "eu_value": "-inf"}])
    for region in ("cyprus", "eu"):
        for value in state.metrics[region].values():
            assert math.isfinite(value)


@pytest.mark.parametrize(
    "label,expected",
    [
        ("Unemployment Rate", "unemploymentRate"),
        ("Youth Unemployment", "youthUnemployment"),
        ("Employment Rate", "employmentRate"),
        ("Average Salary", "averageSalary"),
        ("minimum wage", "averageSalary"),
        ("Labour Force Participation", None),
        ("", None),
    ],
)
def test_match_metric_family(label, expected):
    assert match_metric_family(label) == expected


def test_other_shapes_are_stored_as_general_upload():
    state = DashboardState.seeded()
    trend_before = list(state.monthly_trend)
    rows = [{"sector": "ICT", "jobs": 25000}, {"sector": "Tourism", "jobs": 48000}]

    result = ingest_rows(state, rows)

    assert result.status == UploadStatus.SUCCESS_GENERAL
    assert result.columns == ["sector", "jobs"]
    assert state.general_upload == rows
    assert state.monthly_trend == trend_before


def test_classification_uses_first_row_shape_only():
    rows = [
        {"metric": "Unemployment", "cyprus_value": "5", "eu_value": "6"},
        {"month": "Jan 2025", "Cyprus": 4.8},
    ]
    classification = classify_rows(rows)
    assert classification.kind == UploadKind.METRIC_SET
    assert classification.skipped == 1


def test_empty_rows_are_unrecognized_and_do_not_touch_store():
    state = DashboardState.seeded()
    before = state.snapshot()

    assert classify_rows([]).kind == UploadKind.UNRECOGNIZED
    result = apply_classification(state, Classification(UploadKind.UNRECOGNIZED))

    assert result.status == UploadStatus.ERROR
    assert state.snapshot() == before


def test_unsupported_extension_sets_error_and_keeps_store():
    state = DashboardState.seeded()
    before = state.snapshot()

    result = ingest_upload(state, "data.txt", b"month,Cyprus,EU,date\nJan,1,2,2025-01\n")

    assert result.status == UploadStatus.ERROR
    assert state.upload_status == UploadStatus.ERROR
    assert ".txt" in state.status_message
    assert state.snapshot() == before
    assert state.last_updated is None


def test_header_only_csv_is_rejected_deterministically():
    state = DashboardState.seeded()
    before = state.snapshot()

    result = ingest_upload(state, "empty.csv", b"month,Cyprus,EU,date\n")

    assert result.status == UploadStatus.ERROR
    assert state.snapshot() == before


def test_malformed_file_is_reported_as_parse_error():
    state = DashboardState.seeded()
    before = state.snapshot()

    result = ingest_upload(state, "broken.xlsx", b"definitely not a workbook")

    assert result.status == UploadStatus.ERROR
    assert "broken.xlsx" in result.message
    assert state.snapshot() == before
