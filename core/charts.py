# core/charts.py
"""
Plotly figures for the dashboard tabs.

Every builder takes plain rows / a `DashboardState` plus an optional label
mapping (already translated by the caller) and returns a figure.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from core.datasets import (
    EMPLOYMENT_BY_GENDER,
    SECTORAL_EMPLOYMENT,
    UNEMPLOYMENT_BY_AGE,
    UNEMPLOYMENT_BY_GENDER,
    WAGES_BY_SECTOR,
    latest_employment,
)
from core.store import DashboardState

CYPRUS_COLOR = "#0d9488"
EU_COLOR = "#2563eb"

DEFAULT_LABELS = {
    "cyprus": "Cyprus",
    "eu": "EU Average",
    "percentage": "Percentage (%)",
    "month": "Month",
    "unemploymentRate": "Unemployment Rate",
    "employmentRate": "Employment Rate",
    "youthUnemployment": "Youth Unemployment",
    "labourForceParticipation": "Labour Force Participation",
    "averageSalary": "Average Salary",
    "labour_force": "Labour Force",
    "male": "Male",
    "female": "Female",
    "year": "Year",
    "wage": "EUR / month",
}

PERCENT_METRICS = [
    "unemploymentRate",
    "employmentRate",
    "youthUnemployment",
    "labourForceParticipation",
]


def _labels(labels: Optional[Mapping[str, str]]) -> dict[str, str]:
    out = dict(DEFAULT_LABELS)
    if labels:
        out.update(labels)
    return out


def _style(fig: go.Figure, title: str = "", height: int = 380) -> go.Figure:
    fig.update_layout(
        title=title or None,
        template="plotly_white",
        height=height,
        margin=dict(l=10, r=10, t=55 if title else 20, b=10),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
    )
    return fig


def trend_frame(rows: Sequence[Mapping[str, Any]]) -> pd.DataFrame:
    """Trend rows as a frame with numeric Cyprus/EU columns, row order kept."""
    df = pd.DataFrame(list(rows))
    for col in ("Cyprus", "EU"):
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")
        else:
            df[col] = pd.NA
    if "month" not in df.columns:
        df["month"] = pd.Series(dtype=object)
    return df


def unemployment_trend_chart(
    rows: Sequence[Mapping[str, Any]],
    labels: Optional[Mapping[str, str]] = None,
    title: str = "",
) -> go.Figure:
    lb = _labels(labels)
    df = trend_frame(rows)
    fig = go.Figure()
    for col, name, color in (("Cyprus", lb["cyprus"], CYPRUS_COLOR), ("EU", lb["eu"], EU_COLOR)):
        fig.add_trace(go.Scatter(
            x=df["month"],
            y=df[col],
            mode="lines+markers",
            name=name,
            line=dict(color=color, width=3),
            hovertemplate="<b>%{x}</b><br>%{y:.1f}%<extra></extra>",
        ))
    fig.update_layout(xaxis_title=lb["month"], yaxis_title=lb["percentage"], hovermode="x unified")
    return _style(fig, title)


def metrics_comparison_chart(
    state: DashboardState,
    labels: Optional[Mapping[str, str]] = None,
    title: str = "",
) -> go.Figure:
    """Grouped bars of the percentage indicators, Cyprus vs EU."""
    lb = _labels(labels)
    names = [lb[k] for k in PERCENT_METRICS]
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=names,
        y=[state.get_metric("cyprus", k) for k in PERCENT_METRICS],
        name=lb["cyprus"],
        marker_color=CYPRUS_COLOR,
    ))
    fig.add_trace(go.Bar(
        x=names,
        y=[state.get_metric("eu", k) for k in PERCENT_METRICS],
        name=lb["eu"],
        marker_color=EU_COLOR,
    ))
    fig.update_layout(barmode="group", yaxis_title=lb["percentage"])
    return _style(fig, title)


def employment_over_time_chart(labels: Optional[Mapping[str, str]] = None, title: str = "") -> go.Figure:
    lb = _labels(labels)
    df = pd.DataFrame(EMPLOYMENT_BY_GENDER)
    fig = px.line(
        df,
        x="year",
        y="total",
        markers=True,
        labels={"year": lb["year"], "total": lb["labour_force"]},
    )
    fig.update_traces(line=dict(color="#0ea5e9", width=3))
    return _style(fig, title, height=300)


def gender_breakdown_chart(labels: Optional[Mapping[str, str]] = None, title: str = "") -> go.Figure:
    lb = _labels(labels)
    latest = latest_employment()
    df = pd.DataFrame([
        {"name": lb["male"], "value": latest["male"]},
        {"name": lb["female"], "value": latest["female"]},
    ])
    fig = px.bar(df, x="name", y="value", labels={"name": "", "value": lb["labour_force"]})
    fig.update_traces(marker_color="#22c55e")
    return _style(fig, title, height=300)


def participation_chart(labels: Optional[Mapping[str, str]] = None, title: str = "") -> go.Figure:
    lb = _labels(labels)
    df = pd.DataFrame(EMPLOYMENT_BY_GENDER)
    fig = px.area(
        df,
        x="year",
        y="participationRate",
        labels={"year": lb["year"], "participationRate": lb["labourForceParticipation"]},
    )
    fig.update_yaxes(range=[55, 70])
    return _style(fig, title, height=300)


def _cy_eu_bars(rows: Sequence[Mapping[str, Any]], x: str, lb: dict[str, str], yaxis: str) -> go.Figure:
    df = pd.DataFrame(list(rows))
    fig = go.Figure()
    fig.add_trace(go.Bar(x=df[x], y=df["Cyprus"], name=lb["cyprus"], marker_color=CYPRUS_COLOR))
    fig.add_trace(go.Bar(x=df[x], y=df["EU"], name=lb["eu"], marker_color=EU_COLOR))
    fig.update_layout(barmode="group", yaxis_title=yaxis)
    return fig


def unemployment_by_age_chart(labels: Optional[Mapping[str, str]] = None, title: str = "") -> go.Figure:
    lb = _labels(labels)
    return _style(_cy_eu_bars(UNEMPLOYMENT_BY_AGE, "ageGroup", lb, lb["percentage"]), title)


def unemployment_by_gender_chart(labels: Optional[Mapping[str, str]] = None, title: str = "") -> go.Figure:
    lb = _labels(labels)
    return _style(_cy_eu_bars(UNEMPLOYMENT_BY_GENDER, "gender", lb, lb["percentage"]), title)


def sectoral_employment_chart(title: str = "") -> go.Figure:
    df = pd.DataFrame(SECTORAL_EMPLOYMENT)
    fig = px.pie(df, names="sector", values="share", hole=0.35)
    fig.update_traces(textposition="inside", textinfo="percent+label")
    return _style(fig, title, height=460)


def wage_comparison_chart(labels: Optional[Mapping[str, str]] = None, title: str = "") -> go.Figure:
    lb = _labels(labels)
    fig = _cy_eu_bars(WAGES_BY_SECTOR, "sector", lb, lb["wage"])
    fig.update_xaxes(tickangle=-30)
    return _style(fig, title, height=460)
