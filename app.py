"""Streamlit front-end for the disclosure extraction engine."""
from __future__ import annotations

from typing import Sequence

import pandas as pd
import streamlit as st

from disclosure_extractor import ParseDocumentsUseCase
from disclosure_extractor.application.dto import ParseOutcome, SourceFailure
from disclosure_extractor.application.use_cases import load_sources
from disclosure_extractor.config import SETTINGS
from disclosure_extractor.logging_config import configure_logging
from disclosure_extractor.presentation.report import (
    records_to_dataframe,
    render_csv,
    render_json,
    render_xlsx,
    warnings_to_dataframe,
)

configure_logging(SETTINGS.log_level)

st.set_page_config(page_title="Disclosure Extractor", layout="wide")
st.title("Special Account Performance Extractor")


def run_extraction(files) -> tuple[Sequence[ParseOutcome], Sequence[SourceFailure]]:
    sources, failures = load_sources((file.name, file.getvalue()) for file in files)
    return ParseDocumentsUseCase().execute(sources), failures


if "outcomes" not in st.session_state:
    st.session_state["outcomes"] = None
if "read_failures" not in st.session_state:
    st.session_state["read_failures"] = []


uploaded = st.file_uploader(
    "Upload extracted document text",
    type=["txt"],
    accept_multiple_files=True,
)
run_btn = st.button("Extract", disabled=not uploaded)
if run_btn and uploaded:
    with st.spinner("Extracting..."):
        outcomes, read_failures = run_extraction(uploaded)
        st.session_state["outcomes"] = outcomes
        st.session_state["read_failures"] = read_failures

for failure in st.session_state["read_failures"]:
    st.error(f"Cannot read {failure.name}: {failure.reason}")

outcomes: Sequence[ParseOutcome] | None = st.session_state.get("outcomes")
if not outcomes:
    st.info("Upload one or more text files and run the extraction.")
else:
    for outcome in outcomes:
        if not outcome.ok:
            st.error(f"{outcome.name}: {type(outcome.error).__name__}: {outcome.error}")

    documents = [outcome.document for outcome in outcomes if outcome.ok]
    if documents:
        st.subheader("Summary")
        cols = st.columns(3)
        cols[0].metric("Documents parsed", len(documents))
        cols[1].metric("Accounts", sum(len(document.accounts) for document in documents))
        cols[2].metric("Warnings", sum(len(document.warnings) for document in documents))

        tabs = st.tabs(["Accounts", "Warnings"])
        with tabs[0]:
            accounts_df: pd.DataFrame = records_to_dataframe(documents)
            st.dataframe(accounts_df, use_container_width=True, hide_index=True)
        with tabs[1]:
            warnings_df = warnings_to_dataframe(documents)
            if warnings_df.empty:
                st.success("Every catalog entry was found.")
            else:
                st.dataframe(warnings_df, use_container_width=True, hide_index=True)

        dl1, dl2, dl3 = st.columns(3)
        with dl1:
            st.download_button("Download CSV", render_csv(documents), file_name="accounts.csv", mime="text/csv")
        with dl2:
            st.download_button(
                "Download JSON",
                render_json(documents).encode("utf-8"),
                file_name="accounts.json",
                mime="application/json",
            )
        with dl3:
            st.download_button(
                "Download Excel",
                render_xlsx(documents),
                file_name="accounts.xlsx",
                mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            )
