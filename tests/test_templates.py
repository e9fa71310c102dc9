import runpy

import pytest

from core.templates import TemplateKind, template_csv, template_filename, write_templates


def test_monthly_template_header():
    assert template_csv("monthly").startswith("month,Cyprus,EU,date\n")


def test_metrics_template_header():
    assert template_csv(TemplateKind.METRICS).splitlines()[0] == "metric,cyprus_value,eu_value"


def test_template_filenames_are_deterministic():
    assert template_filename("monthly") == "monthly_data_template.csv"
    assert template_filename(TemplateKind.METRICS) == "metrics_data_template.csv"


def test_unknown_template_kind_is_rejected():
    with pytest.raises(ValueError):
        template_csv("weekly")


def test_write_templates(tmp_path):
    paths = write_templates(tmp_path / "out")
    assert sorted(p.name for p in paths) == ["metrics_data_template.csv", "monthly_data_template.csv"]
    assert (tmp_path / "out" / "monthly_data_template.csv").read_text(encoding="utf-8") == template_csv("monthly")


def test_write_templates_script(tmp_path):
    script = runpy.run_path("scripts/write_templates.py")
    paths = script["main"]([str(tmp_path)])
    assert {p.name for p in paths} == {"monthly_data_template.csv", "metrics_data_template.csv"}


def test_template_headers_match_recognised_columns():
    from core.config import METRIC_COLUMNS, MONTHLY_COLUMNS

    assert template_csv("monthly").splitlines()[0].split(",") == list(MONTHLY_COLUMNS)
    assert template_csv("metrics").splitlines()[0].split(",") == list(METRIC_COLUMNS)
