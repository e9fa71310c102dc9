from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

workspace_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(workspace_root))

from app.i18n import init_language, render_language_switcher, t
from core.config import APP_TITLE, VERSION

init_language()
st.set_page_config(page_title=f"{APP_TITLE} - About", layout="wide")
render_language_switcher()

st.title(f"ℹ️ {t('about.title')}")
st.markdown(t("about.description"))

c1, c2 = st.columns(2)
c1.metric(t("about.version"), VERSION)
c2.metric(t("language.name"), "EN / EL")

st.subheader(t("about.sources"))
st.markdown(t("about.sources_text"))
