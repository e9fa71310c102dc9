import sys
from pathlib import Path

import streamlit as st

# Add the workspace root to the Python path so core module can be imported
workspace_root = Path(__file__).parent.parent
sys.path.insert(0, str(workspace_root))

from app.i18n import init_language, t
from core.config import APP_TITLE

init_language()

st.set_page_config(
    page_title=APP_TITLE,
    layout="wide",
    initial_sidebar_state="expanded",
)

pages = [
    st.Page("pages/0_Dashboard.py", title=t("nav.dashboard"), icon="📊", default=True),
    st.Page("pages/1_DataUpload.py", title=t("nav.data_upload"), icon="⤴️"),
    st.Page("pages/8_About.py", title=t("nav.about"), icon="ℹ️"),
]

pg = st.navigation(pages, position="sidebar")
pg.run()
