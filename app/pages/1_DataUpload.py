from __future__ import annotations

import sys
from pathlib import Path

import pandas as pd
import streamlit as st

workspace_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(workspace_root))

from app.i18n import init_language, render_language_switcher, t
from app.state import get_dashboard_state
from core.config import ALLOWED_EXTENSIONS, APP_TITLE
from core.ingest import ingest_upload
from core.store import UploadStatus
from core.templates import TemplateKind, template_csv, template_filename

init_language()
st.set_page_config(page_title=f"{APP_TITLE} - Data Upload", layout="wide")
render_language_switcher()

state = get_dashboard_state()

st.title(f"⤴️ {t('upload.title')}")
st.markdown(t("upload.help"))

file = st.file_uploader(t("upload.file_label"), type=list(ALLOWED_EXTENSIONS))
if file is not None and st.button(t("upload.import"), type="primary"):
    result = ingest_upload(state, file.name, file.getvalue())
    if result.status == UploadStatus.SUCCESS_MONTHLY:
        state.set_status(result.status, t("upload.success_monthly", rows=result.rows))
    elif result.status == UploadStatus.SUCCESS_METRICS:
        state.set_status(result.status, t("upload.success_metrics", merged=result.merged))
    elif result.status == UploadStatus.SUCCESS_GENERAL:
        state.set_status(result.status, t("upload.success_general", rows=result.rows))
    st.rerun()

# Outcome of the last action, kept on the store so it survives reruns.
if state.upload_status == UploadStatus.ERROR:
    st.error(t("upload.error", message=state.status_message))
elif state.upload_status.is_success:
    st.success(state.status_message)
elif state.status_message:
    st.info(state.status_message)

st.divider()

st.subheader(t("upload.templates"))
st.caption(t("upload.templates_help"))
c1, c2 = st.columns(2)
for col, kind, label in (
    (c1, TemplateKind.MONTHLY, "upload.monthly_template"),
    (c2, TemplateKind.METRICS, "upload.metrics_template"),
):
    col.download_button(
        label=f"📄 {t(label)}",
        data=template_csv(kind),
        file_name=template_filename(kind),
        mime="text/csv",
        key=f"template_{kind.value}",
        width="stretch",
    )

st.divider()

if st.button(f"↩️ {t('upload.reset')}"):
    state.reset()
    state.set_status(UploadStatus.NONE, t("upload.reset_done"))
    st.rerun()

st.subheader(t("sections.uploaded_table"))
if state.general_upload:
    st.dataframe(pd.DataFrame(state.general_upload), width="stretch", hide_index=True)
else:
    st.info(t("upload.no_general"))
