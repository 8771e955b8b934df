"""
Movie detail modal for the wide (desktop) layout.
"""

import streamlit as st

from tossremote.ui.state import RecommendationBoard
from tossremote.ui.utils.api_client import get_movie_details


def load_details(board: RecommendationBoard, line: str) -> dict:
    """Return cached modal data, fetching it on first open."""
    if board.needs_details(line):
        board.begin_details(line)
        try:
            board.store_details(line, get_movie_details(line))
        except Exception:
            board.fail_details(line)
    return board.details.get(line, {})


@st.dialog("Movie details", width="large")
def show_movie_modal(board: RecommendationBoard, line: str) -> None:
    """Backdrop, poster, credits, streaming and trailer for one line."""
    with st.spinner("Loading movie details..."):
        data = load_details(board, line)

    if data.get("backdrop_path"):
        st.image(data["backdrop_path"], use_container_width=True)

    poster_col, info_col = st.columns([1, 2])
    with poster_col:
        if data.get("poster_path"):
            st.image(data["poster_path"], use_container_width=True)
    with info_col:
        heading = data.get("title", line)
        if data.get("year"):
            heading += f" ({data['year']})"
        st.subheader(heading)

        facts = []
        if data.get("rating"):
            facts.append(f"⭐ {data['rating']:.1f}/10")
        if data.get("runtime"):
            facts.append(f"⏱️ {data['runtime'] // 60}h {data['runtime'] % 60}min")
        if data.get("genres"):
            facts.append(", ".join(data["genres"]))
        if facts:
            st.caption(" | ".join(facts))

        st.write(data.get("description", ""))
        if data.get("director"):
            st.markdown(f"**Director:** {data['director']}")
        if data.get("cast"):
            st.markdown(f"**Cast:** {', '.join(data['cast'])}")
        if data.get("streaming"):
            st.markdown(f"**Streaming on:** {', '.join(data['streaming'])}")
        if data.get("tmdb_url"):
            st.markdown(f"[View on TMDB]({data['tmdb_url']})")

    if data.get("trailer"):
        st.video(data["trailer"])

    if st.button("Close"):
        st.rerun()
