# app/i18n.py
"""
Internationalization (i18n) for the labour market dashboard.

- Loads translations from `app/locales/*.json` (en, el)
- Supports dot notation (`tabs.overview`) and short aliases (`overview`)
- Falls back to English, then to the key itself
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import streamlit as st

from core.config import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES

logger = logging.getLogger(__name__)

LOCALES_DIR = Path(__file__).parent / "locales"

# Short keys (camelCase names used by the chart/metric code) -> locale paths.
KEY_ALIASES = {
    "title": "app.title",
    "lastUpdated": "app.last_updated",
    "exportToExcel": "app.export_to_excel",
    "overview": "tabs.overview",
    "unemploymentTrends": "tabs.unemployment_trends",
    "demographics": "tabs.demographics",
    "employment": "tabs.employment",
    "sectoralEmployment": "tabs.sectoral_employment",
    "wageComparison": "tabs.wage_comparison",
    "dataTables": "tabs.data_tables",
    "lang": "language.name",
    "switch_lang": "language.switch",
}

LANGUAGE_LABELS = {"en": "English", "el": "Ελληνικά"}


@st.cache_data(show_spinner=False)
def _load_locale_files() -> dict[str, dict[str, Any]]:
    loaded: dict[str, dict[str, Any]] = {}

    for path in LOCALES_DIR.glob("*.json"):
        lang = path.stem
        try:
            loaded[lang] = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError):
            logger.exception("failed to load locale file %s", path)
            loaded[lang] = {}

    for lang in SUPPORTED_LANGUAGES:
        loaded.setdefault(lang, {})
    return loaded


def init_language() -> None:
    if "language" not in st.session_state:
        st.session_state.language = DEFAULT_LANGUAGE


def get_language() -> str:
    init_language()
    return st.session_state.language


def set_language(lang: str) -> None:
    locales = _load_locale_files()
    if lang in locales:
        st.session_state.language = lang


def _resolve_path(data: dict[str, Any], key: str) -> str | None:
    result: Any = data
    for part in key.split("."):
        if isinstance(result, dict) and part in result:
            result = result[part]
        else:
            return None
    if isinstance(result, (dict, list)):
        return None
    return str(result)


def t(key: str, lang: str | None = None, **kwargs: Any) -> str:
    if lang is None:
        lang = get_language()

    locales = _load_locale_files()
    if lang not in locales:
        lang = DEFAULT_LANGUAGE

    alias_key = KEY_ALIASES.get(key)
    text = None
    for candidate_lang in (lang, DEFAULT_LANGUAGE):
        data = locales.get(candidate_lang, {})
        text = _resolve_path(data, key)
        if text is None and alias_key:
            text = _resolve_path(data, alias_key)
        if text is not None:
            break

    if text is None:
        return key
    return text.format(**kwargs) if kwargs else text


def section(prefix: str, keys, lang: str | None = None) -> dict[str, str]:
    """Translate several keys under one locale section, e.g. chart labels."""
    return {k: t(f"{prefix}.{k}", lang=lang) for k in keys}


def render_language_switcher() -> None:
    locales = _load_locale_files()
    options = sorted(locales.keys())
    current = get_language()
    if current not in options:
        current = DEFAULT_LANGUAGE

    c1, c2 = st.columns([6, 2])
    c2.markdown("### 🌐")
    selected = c2.selectbox(
        "Language / Γλώσσα",
        options=options,
        index=options.index(current),
        format_func=lambda x: LANGUAGE_LABELS.get(x, x),
        key="lang_selectbox",
        label_visibility="collapsed",
    )

    if selected != get_language():
        set_language(selected)
        st.rerun()
