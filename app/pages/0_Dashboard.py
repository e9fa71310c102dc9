# app/pages/0_Dashboard.py
"""
Dashboard page: seven tabs over the current in-memory dataset store.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pandas as pd
import streamlit as st

workspace_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(workspace_root))

from app.i18n import init_language, render_language_switcher, section, t
from app.state import get_dashboard_state
from core import charts
from core.config import APP_TITLE, EXPORT_FILENAME, METRIC_KEYS
from core.datasets import EMPLOYMENT_BY_GENDER, latest_employment
from core.export import export_workbook, metrics_frame

init_language()
st.set_page_config(page_title=f"{APP_TITLE} - Dashboard", layout="wide")
render_language_switcher()

state = get_dashboard_state()

labels = {
    **section("chart_labels", ["cyprus", "eu", "percentage", "month", "year", "labour_force", "male", "female", "wage"]),
    **section("metrics", METRIC_KEYS),
}


def fmt_metric(key: str, value) -> str:
    if value is None:
        return "–"
    if key == "averageSalary":
        return f"€{value:,.0f}"
    return f"{value:.1f}%"


# ===== HEADER =====
st.title(f"🇨🇾 {t('app.title')}")
h1, h2 = st.columns([4, 1])
stamp = state.last_updated.strftime("%Y-%m-%d %H:%M UTC") if state.last_updated else t("app.never_updated")
h1.caption(f"{t('app.last_updated')} {stamp}")
h2.download_button(
    label=f"📥 {t('app.export_to_excel')}",
    data=export_workbook(state),
    file_name=EXPORT_FILENAME,
    mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    width="stretch",
)

tab_keys = [
    "overview",
    "unemployment_trends",
    "demographics",
    "employment",
    "sectoral_employment",
    "wage_comparison",
    "data_tables",
]
(
    overview_tab,
    trends_tab,
    demographics_tab,
    employment_tab,
    sectoral_tab,
    wage_tab,
    tables_tab,
) = st.tabs([t(f"tabs.{k}") for k in tab_keys])

with overview_tab:
    st.subheader(t("sections.key_indicators"))
    st.caption(t("sections.comprehensive_overview"))

    for region, heading in (("cyprus", "metrics.cyprus_key_metrics"), ("eu", "metrics.eu_average_metrics")):
        st.markdown(f"**{t(heading)}**")
        cols = st.columns(len(METRIC_KEYS))
        for col, key in zip(cols, METRIC_KEYS):
            col.metric(labels[key], fmt_metric(key, state.get_metric(region, key)))

    st.divider()
    st.subheader(t("sections.performance_comparison"))
    st.plotly_chart(
        charts.metrics_comparison_chart(state, labels, title=t("sections.cyprus_vs_eu")),
        width="stretch",
    )

with trends_tab:
    st.subheader(t("sections.monthly_unemployment"))
    st.plotly_chart(charts.unemployment_trend_chart(state.monthly_trend, labels), width="stretch")
    latest = state.monthly_trend[-1]
    c1, c2, c3 = st.columns(3)
    c1.metric(labels["cyprus"], f"{latest.get('Cyprus')}%")
    c2.metric(labels["eu"], f"{latest.get('EU')}%")
    c3.metric(t("chart_labels.month"), str(latest.get("month", "")))

with demographics_tab:
    left, right = st.columns(2)
    with left:
        st.plotly_chart(charts.unemployment_by_age_chart(labels, title=t("sections.by_age")), width="stretch")
    with right:
        st.plotly_chart(charts.unemployment_by_gender_chart(labels, title=t("sections.by_gender")), width="stretch")

with employment_tab:
    latest = latest_employment()
    st.subheader(f"{t('employment.key_findings')} ({latest['year']})")
    summary = pd.DataFrame(
        [
            {t("employment.metric"): t("employment.total_labour_force"), t("employment.value"): f"{latest['total']:,}"},
            {t("employment.metric"): t("employment.male"), t("employment.value"): f"{latest['male']:,}"},
            {t("employment.metric"): t("employment.female"), t("employment.value"): f"{latest['female']:,}"},
            {t("employment.metric"): t("employment.participation_rate"), t("employment.value"): f"{latest['participationRate']}%"},
        ]
    )
    st.dataframe(summary, width="stretch", hide_index=True)

    left, right = st.columns(2)
    with left:
        st.plotly_chart(charts.employment_over_time_chart(labels, title=t("employment.over_time")), width="stretch")
    with right:
        st.plotly_chart(
            charts.gender_breakdown_chart(labels, title=f"{t('employment.gender_breakdown')} ({latest['year']})"),
            width="stretch",
        )
    st.plotly_chart(charts.participation_chart(labels, title=t("employment.participation_trend")), width="stretch")

with sectoral_tab:
    st.plotly_chart(charts.sectoral_employment_chart(title=t("sections.sector_share")), width="stretch")

with wage_tab:
    st.plotly_chart(charts.wage_comparison_chart(labels, title=t("sections.wage_by_sector")), width="stretch")
    c1, c2 = st.columns(2)
    c1.metric(
        f"{labels['averageSalary']} - {labels['cyprus']}",
        fmt_metric("averageSalary", state.get_metric("cyprus", "averageSalary")),
    )
    c2.metric(
        f"{labels['averageSalary']} - {labels['eu']}",
        fmt_metric("averageSalary", state.get_metric("eu", "averageSalary")),
    )

with tables_tab:
    st.markdown(f"**{t('sections.trend_table')}**")
    st.dataframe(pd.DataFrame(state.monthly_trend), width="stretch", hide_index=True)

    st.markdown(f"**{t('sections.metrics_table')}**")
    mf = metrics_frame(state)
    mf["metric"] = mf["metric"].map(labels)
    st.dataframe(mf, width="stretch", hide_index=True)

    st.markdown(f"**{t('sections.employment_table')}**")
    st.dataframe(pd.DataFrame(EMPLOYMENT_BY_GENDER), width="stretch", hide_index=True)

    if state.general_upload:
        st.markdown(f"**{t('sections.uploaded_table')}**")
        st.dataframe(pd.DataFrame(state.general_upload), width="stretch", hide_index=True)
