import math

import pytest

from core.config import METRIC_KEYS, REGIONS
from core.datasets import DEFAULT_METRICS, DEFAULT_MONTHLY_TREND
from core.store import DashboardState, UploadStatus


def test_seeded_state_has_defaults_and_finite_metrics():
    state = DashboardState.seeded()

    assert state.monthly_trend == DEFAULT_MONTHLY_TREND
    assert [p["date"] for p in state.monthly_trend] == sorted(p["date"] for p in state.monthly_trend)
    for region in REGIONS:
        assert set(state.metrics[region]) == set(METRIC_KEYS)
        assert all(math.isfinite(v) for v in state.metrics[region].values())
    assert state.upload_status == UploadStatus.NONE


def test_seeded_state_does_not_share_static_tables():
    state = DashboardState.seeded()
    state.monthly_trend[0]["Cyprus"] = 99.0
    state.metrics["eu"]["employmentRate"] = 1.0

    assert DEFAULT_MONTHLY_TREND[0]["Cyprus"] == 4.8
    assert DEFAULT_METRICS["eu"]["employmentRate"] == 75.8


def test_merge_metric_drops_unknown_keys_and_non_finite_values():
    state = DashboardState.seeded()

    assert state.merge_metric("cyprus", "inflation", 2.0) is False
    assert state.merge_metric("mars", "unemploymentRate", 2.0) is False
    assert state.merge_metric("cyprus", "unemploymentRate", float("nan")) is False
    assert state.merge_metric("cyprus", "unemploymentRate", "abc") is False
    assert "inflation" not in state.metrics["cyprus"]
    assert state.last_updated is None

    assert state.merge_metric("eu", "unemploymentRate", "6.2") is True
    assert state.get_metric("eu", "unemploymentRate") == 6.2
    assert state.last_updated is not None


def test_metric_set_returns_copy_and_rejects_unknown_region():
    state = DashboardState.seeded()
    snapshot = state.metric_set("cyprus")
    snapshot["unemploymentRate"] = 0.0
    assert state.get_metric("cyprus", "unemploymentRate") == 4.6

    with pytest.raises(KeyError):
        state.metric_set("us")


def test_reset_restores_seeded_defaults():
    state = DashboardState.seeded()
    state.replace_trend([{"month": "Jan", "Cyprus": 1, "EU": 2, "date": "2030-01"}])
    state.merge_metric("cyprus", "averageSalary", 9999)
    state.set_general_upload([{"a": 1}])
    state.set_status(UploadStatus.SUCCESS_GENERAL)

    state.reset()

    assert state.snapshot() == DashboardState.seeded().snapshot()
    assert state.upload_status == UploadStatus.NONE
    assert state.last_updated is None


def test_upload_status_success_flag():
    assert UploadStatus.SUCCESS_MONTHLY.is_success
    assert UploadStatus.SUCCESS_GENERAL.value == "success-general"
    assert not UploadStatus.ERROR.is_success
    assert not UploadStatus.NONE.is_success
