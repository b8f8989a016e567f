"""Single-page Streamlit frontend: upload a CSV, see per-person metrics."""

from __future__ import annotations

import hashlib
import io

import pandas as pd
import streamlit as st

from app.config import get_ui_settings
from app.domain.records import UploadErrorKind
from app.domain.upload import UploadFailure, UploadSuccess
from app.logging_utils import configure_logging
from app.presenters.metrics_presenter import (
    build_chart_series,
    build_metrics_table,
    build_overall_summary,
    export_report_json,
    export_table_csv,
)
from app.services.upload_service import get_metrics_upload_service
from app.ui_state import (
    ensure_upload_state,
    is_new_upload,
    replace_upload_state,
    reset_uploader,
    uploader_key,
)

configure_logging()
ui_settings = get_ui_settings()

st.set_page_config(page_title=ui_settings.page_title, page_icon="CSV", layout="wide")


@st.cache_data(show_spinner=False)
def _load_csv_preview(data: bytes, preview_rows: int) -> pd.DataFrame:
    """Load bounded CSV preview for memory-friendly display."""
    return pd.read_csv(
        io.BytesIO(data),
        nrows=preview_rows,
        dtype=str,
        index_col=False,
        keep_default_na=False,
    )


ensure_upload_state(st.session_state)


with st.sidebar:
    st.header("Controls")
    st.caption("Required columns: name, date, value")
    if st.button("Clear", use_container_width=True):
        reset_uploader(st.session_state)
        st.rerun()


st.title(ui_settings.page_title)

st.subheader("Upload")
uploaded_file = st.file_uploader(
    "Upload CSV",
    type=["csv"],
    key=uploader_key(st.session_state),
)
if uploaded_file is not None:
    uploaded_bytes = uploaded_file.getvalue()
    uploaded_hash = hashlib.sha256(uploaded_bytes).hexdigest()
    if is_new_upload(st.session_state, uploaded_hash):
        try:
            result = get_metrics_upload_service().process_upload(
                data=uploaded_bytes,
                filename=uploaded_file.name,
                content_type=uploaded_file.type,
            )
        except Exception as exc:  # noqa: BLE001
            result = UploadFailure(
                filename=uploaded_file.name,
                kind=UploadErrorKind.UNEXPECTED_ERROR,
                message=f"Upload error: {exc}",
            )
        replace_upload_state(
            st.session_state,
            upload_hash=uploaded_hash,
            data=uploaded_bytes,
            result=result,
        )


st.subheader("Results")
result = st.session_state.upload_result
if result is None:
    st.info("Upload a CSV file with name, date and value columns to compute metrics.")
elif isinstance(result, UploadFailure):
    st.error(result.message)
    if result.details:
        with st.expander("Row details"):
            st.dataframe(
                pd.DataFrame(
                    [
                        {
                            "row": error.row_number,
                            "column": error.column,
                            "message": error.message,
                            "value": error.value,
                        }
                        for error in result.details
                    ]
                ),
                hide_index=True,
                use_container_width=True,
            )
elif isinstance(result, UploadSuccess) and result.metrics is None:
    st.info("The file has valid headers but no data rows.")
else:
    metrics = result.metrics
    st.caption(f"{result.filename or 'upload'}: {metrics.row_count:,} row(s), {len(metrics.per_person)} people")

    summary = build_overall_summary(metrics)
    mcol1, mcol2, mcol3 = st.columns(3)
    mcol1.metric("Overall average", summary["average"])
    mcol2.metric("Overall min", summary["min"])
    mcol3.metric("Overall max", summary["max"])

    st.markdown("**Per-person metrics**")
    st.dataframe(
        build_metrics_table(metrics),
        column_config={"average": st.column_config.NumberColumn(format="%.2f")},
        hide_index=True,
        use_container_width=True,
    )

    st.markdown("**Average by person**")
    st.bar_chart(build_chart_series(metrics), y="average")

    dcol1, dcol2 = st.columns(2)
    with dcol1:
        st.download_button(
            label="Download JSON",
            data=export_report_json(result),
            file_name="metrics_report.json",
            mime="application/json",
            use_container_width=True,
        )
    with dcol2:
        st.download_button(
            label="Download CSV",
            data=export_table_csv(metrics),
            file_name="metrics_by_person.csv",
            mime="text/csv",
            use_container_width=True,
        )

    with st.expander("Show uploaded data"):
        st.dataframe(
            _load_csv_preview(st.session_state.upload_bytes, ui_settings.preview_rows),
            use_container_width=True,
        )
        st.caption(f"Showing first {ui_settings.preview_rows} row(s) at most.")
