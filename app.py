"""
Challenge Report - Streamlit Web App

A web viewer for finished Mathematics Challenge sessions: participant
details, the per-question table, the text report and a PDF download.
"""

import json
import os
import tempfile
from datetime import datetime
from typing import Optional

import pandas as pd
import streamlit as st

from challenge_report import (
    ConsoleReporter,
    PdfReporter,
    ReportConfig,
    ReportInput,
    SessionParser,
)

# Page configuration
st.set_page_config(
    page_title="Challenge Report",
    page_icon="🧮",
    layout="wide",
)


def load_session(uploaded_file) -> Optional[ReportInput]:
    """Parse an uploaded session file, showing any problem in the page."""
    try:
        data = json.load(uploaded_file)
        return SessionParser().parse(data)
    except ValueError as e:
        st.error(f"Could not read {uploaded_file.name}: {e}")
        return None


def attempts_dataframe(report: ReportInput) -> pd.DataFrame:
    """Tabulate the attempts, one row per question in question order."""
    rows = [
        {
            "#": i,
            "Question": a.question_text,
            "Your Answer": a.given_answer,
            "Correct Answer": a.correct_answer,
            "Score": a.score,
            "Time Taken (s)": a.time_taken_seconds,
        }
        for i, a in enumerate(report.attempts, 1)
    ]
    columns = ["#", "Question", "Your Answer", "Correct Answer", "Score", "Time Taken (s)"]
    return pd.DataFrame(rows, columns=columns)


def _safe_delete_file(filepath: str) -> None:
    """Delete a temporary file if it was created."""
    if filepath and os.path.exists(filepath):
        os.unlink(filepath)


def generate_pdf_report(report: ReportInput) -> Optional[bytes]:
    """Generate the PDF report and return it as bytes. The temp file is always deleted."""
    tmp_path = None
    try:
        with tempfile.NamedTemporaryFile(delete=False, suffix='.pdf') as tmp:
            tmp_path = tmp.name

        result = PdfReporter().export(tmp_path, report.attempts)
        if not result.success:
            st.error(f"PDF generation failed: {result.error}")
            return None

        with open(tmp_path, 'rb') as f:
            return f.read()
    finally:
        _safe_delete_file(tmp_path)


def display_summary(report: ReportInput):
    """Show participant details as metrics."""
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Username", report.username)
    col2.metric("School Registration Number", report.school_reg_no)
    col3.metric("Total Time Taken", f"{report.total_time_seconds} s")
    col4.metric("Total Score", report.total_score)


def main():
    """Main application entry point."""
    st.title("🧮 Challenge Report")

    with st.sidebar:
        st.markdown("## 📁 Session")
        session_file = st.file_uploader(
            "Session file (JSON)",
            type=["json"],
            help="Session file saved by the quiz runner at the end of a challenge"
        )

    if session_file is None:
        st.info("Upload a session file using the sidebar to see its report.")
        return

    report = load_session(session_file)
    if report is None:
        return

    display_summary(report)

    st.markdown("### 📋 Questions")
    if report.attempts:
        st.dataframe(attempts_dataframe(report), use_container_width=True, hide_index=True)
    else:
        st.warning("This session has no answered questions.")

    st.markdown("### 🖥️ Text Report")
    st.code(ConsoleReporter(ReportConfig(use_color=False)).format_report(report), language=None)

    st.markdown("### 📥 Download Report")
    if st.button("📄 Generate PDF Report", type="secondary"):
        with st.spinner("Generating report..."):
            pdf_data = generate_pdf_report(report)

        if pdf_data is not None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            st.download_button(
                label="⬇️ Download PDF Report",
                data=pdf_data,
                file_name=f"challenge_report_{timestamp}.pdf",
                mime="application/pdf"
            )


if __name__ == "__main__":
    main()
