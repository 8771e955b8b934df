"""
Recommendation row component with a toggled details panel.
"""

import streamlit as st

from tossremote.core.titles import parse_movie_line
from tossremote.ui.state import PanelStatus, RecommendationBoard
from tossremote.ui.utils.api_client import get_description


def toggle_details(board: RecommendationBoard, line: str) -> None:
    """Open/close a line's panel, fetching its description on first use."""
    if not board.toggle_details(line):
        return
    with st.spinner("Loading details..."):
        try:
            board.store_description(line, get_description(line))
        except Exception:
            board.fail_description(line)


def render_movie_card(
    board: RecommendationBoard,
    line: str,
    compact: bool = False,
) -> None:
    """
    Render one recommendation line.

    Args:
        board: Current recommendation board
        line: "Title (Year) - Director" text as returned by the API
        compact: Single-column mobile layout (poster inline, no modal)
    """
    title, year = parse_movie_line(line)
    director = line.split(" - ", 1)[1].strip() if " - " in line else ""
    status = board.status(line)

    with st.container(border=True):
        poster_col, text_col = st.columns([1, 4] if compact else [1, 6])
        with poster_col:
            if board.posters.get(line):
                st.image(board.posters[line], use_container_width=True)
            elif board.loading_posters.get(line):
                st.caption("Loading poster...")
        with text_col:
            st.markdown(f"**{title}**" + (f" ({year})" if year else ""))
            meta = []
            if director:
                meta.append(director)
            if line in board.ratings:
                meta.append(f"⭐ {board.ratings[line]:.1f}/10")
            if meta:
                st.caption(" | ".join(meta))

            buttons = st.columns(2)
            label = "Hide details" if status is PanelStatus.SHOWN else "Show details"
            if buttons[0].button(label, key=f"toggle_{line}", disabled=status is PanelStatus.LOADING):
                toggle_details(board, line)
                st.rerun()
            if not compact and buttons[1].button("More info", key=f"modal_{line}"):
                st.session_state["modal_movie"] = line
                st.rerun()

        if board.is_expanded(line):
            description = board.descriptions.get(line, {})
            st.text(description.get("description", ""))
            if description.get("tmdb_url"):
                st.markdown(f"[View on TMDB]({description['tmdb_url']})")
