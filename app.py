"""Streamlit page: Business Analyst job listings with recency and company filters."""
from __future__ import annotations

import html
import sys
from pathlib import Path

import streamlit as st

ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT))

from jobboard.board import Board, open_board
from jobboard.filters import (
    NONE_OPTION,
    FilterKind,
    any_enabled,
    reset_filters,
    select_company,
    toggle_recency,
)
from jobboard.log import get_logger
from jobboard.models import JobRecord

log = get_logger("app")

# ── Constants ────────────────────────────────────────────────────────────

CARDS_PER_ROW = 4

_CARD_CSS = """
<style>
[data-testid="stAppViewContainer"] {
    background: linear-gradient(135deg, #e8eaf6 0%, #f3e5f5 40%, #e0f2f1 100%);
}
[data-testid="stSidebar"] {
    background: rgba(255,255,255,0.55);
    backdrop-filter: blur(16px);
    -webkit-backdrop-filter: blur(16px);
    border-right: 1px solid rgba(255,255,255,0.3);
}
.block-container {
    padding-top: 2rem;
}
.stButton > button[kind="primary"] {
    border-radius: 8px;
    font-weight: 600;
}
h1, h2, h3 {
    color: #1a1a2e;
}
/* job card */
.job-card {
    height: 100%;
    margin-bottom: 1rem;
    padding: 1rem 1.25rem;
    background: rgba(255,255,255,0.65);
    backdrop-filter: blur(10px);
    -webkit-backdrop-filter: blur(10px);
    border: 1px solid rgba(74,144,217,0.25);
    border-radius: 12px;
    box-shadow: 0 4px 16px rgba(0,0,0,0.05);
}
.job-card h5 { margin: 0 0 0.4rem 0; }
.job-card .company { font-weight: 600; color: #333; margin-bottom: 0.4rem; }
.job-card .desc { font-size: 0.9rem; color: #444; }
.job-card .posted { font-size: 0.8rem; color: #777; }
</style>
"""

# ── Helpers ──────────────────────────────────────────────────────────────


def _board() -> Board:
    """The viewer's board; fetched on the first render of the session only."""
    if "board" not in st.session_state:
        with st.spinner("Fetching jobs…"):
            st.session_state["board"] = open_board()
    return st.session_state["board"]


def _on_company_change() -> None:
    select_company(_board().filters, st.session_state.get("company_select"))


def _on_clear_filters() -> None:
    reset_filters(_board().filters)
    st.session_state["company_select"] = NONE_OPTION


def _on_reload() -> None:
    st.session_state.pop("board", None)
    st.session_state.pop("company_select", None)
    log.info("Reload requested")


def _card(job: JobRecord) -> str:
    posted = (
        f'<div class="posted">{html.escape(job.posted_date)}</div>' if job.posted_date else ""
    )
    return (
        '<div class="job-card">'
        f"<h5>{html.escape(job.job_title)}</h5>"
        f'<div class="company">{html.escape(job.company_name)}</div>'
        f'<div class="desc">{html.escape(job.short_desc)}</div>'
        f"{posted}"
        "</div>"
    )


# ── Page: Jobs ───────────────────────────────────────────────────────────


def page_jobs() -> None:
    board = _board()
    st.header(f"{board.job_title} Jobs")

    if not board.feed.ok:
        st.error(board.feed.error)

    recency = board.filters[FilterKind.RECENCY.value]

    c1, c2 = st.columns(2)
    with c1:
        st.selectbox(
            "Select Company Name",
            board.company_options(),
            key="company_select",
            on_change=_on_company_change,
        )
    with c2:
        st.write("")
        label = (
            f"Last {board.recency_days} days only (click to show all)"
            if recency.enabled
            else f"Show Jobs in last {board.recency_days} days"
        )
        st.button(
            label,
            type="primary" if recency.enabled else "secondary",
            on_click=toggle_recency,
            args=(board.filters,),
            use_container_width=True,
        )

    st.caption(board.caption())
    st.divider()

    shown = board.visible()
    if not shown:
        if board.feed.ok:
            st.info("No jobs match the selected filters.")
        return

    for start in range(0, len(shown), CARDS_PER_ROW):
        cols = st.columns(CARDS_PER_ROW)
        for col, job in zip(cols, shown[start:start + CARDS_PER_ROW]):
            col.markdown(_card(job), unsafe_allow_html=True)


def _inject_css() -> None:
    st.markdown(_CARD_CSS, unsafe_allow_html=True)


def _sidebar_status() -> None:
    with st.sidebar:
        board = st.session_state.get("board")
        st.markdown("**Feed**")
        if board is None:
            st.markdown("Not loaded")
        elif board.feed.ok:
            st.markdown(f"✅  {len(board.feed.jobs)} jobs from `{board.feed.source}`")
        else:
            st.markdown(f"⚠️  `{board.feed.source}` unavailable")
        if board is not None:
            st.button(
                "✖️ Clear filters",
                on_click=_on_clear_filters,
                disabled=not any_enabled(board.filters),
                use_container_width=True,
            )
        st.button("🔄 Reload jobs", on_click=_on_reload, use_container_width=True)


def _wrap_jobs():
    _inject_css()
    page_jobs()
    _sidebar_status()


pages = [
    st.Page(_wrap_jobs, title="Jobs", icon="💼", url_path="jobs", default=True),
]

nav = st.navigation(pages)
nav.run()
