"""
Session state helpers for Streamlit.
"""

import streamlit as st

from tossremote.ui.state import RecommendationBoard


def get_board() -> RecommendationBoard:
    """Get the recommendation board of the current browser session."""
    return st.session_state["board"]


def is_compact_layout() -> bool:
    """Whether the single-column (mobile) layout is selected."""
    return st.session_state.get("compact_layout", False)


def init_session_state() -> None:
    """Initialize session state keys if not present."""
    if "board" not in st.session_state:
        st.session_state["board"] = RecommendationBoard()
    if "compact_layout" not in st.session_state:
        st.session_state["compact_layout"] = False
    if "trending" not in st.session_state:
        st.session_state["trending"] = None
    if "trending_offset" not in st.session_state:
        st.session_state["trending_offset"] = 0
    if "modal_movie" not in st.session_state:
        st.session_state["modal_movie"] = None
