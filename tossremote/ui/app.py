"""
Streamlit single-page app for Toss the Remote.

Run: streamlit run tossremote/ui/app.py --server.port 8501
"""

import sys
from pathlib import Path

import streamlit as st

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from tossremote.ui.components.movie_card import render_movie_card
from tossremote.ui.components.movie_modal import show_movie_modal
from tossremote.ui.components.trending import render_trending
from tossremote.ui.state import load_all_posters
from tossremote.ui.utils.api_client import error_message, get_description, get_trending, recommend
from tossremote.ui.utils.session_state import get_board, init_session_state, is_compact_layout
from tossremote.utils.logging_config import configure_ui_logging, get_logger

st.set_page_config(
    page_title="Movie Recommendations | Toss the Remote",
    page_icon="🎬",
    layout="wide",
)

if "logging_configured" not in st.session_state:
    configure_ui_logging()
    st.session_state["logging_configured"] = True
logger = get_logger(__name__)

init_session_state()
board = get_board()

with st.sidebar:
    st.toggle("Compact layout", key="compact_layout", help="Single-column layout for small screens")
compact = is_compact_layout()


def fetch_batch(exclude: list[str], failure: str) -> None:
    """Request a batch, add it to the board and preload its posters."""
    board.error = None
    try:
        with st.spinner("Finding movies for you..."):
            text = recommend(board.movies_text, exclude)
    except Exception as e:
        logger.error("Recommendation request failed: %s", e)
        board.error = error_message(e, failure)
        return
    added = board.add_batch(text)
    with st.spinner("Loading posters..."):
        load_all_posters(board, added, get_description)


st.title("🎬 Toss the Remote")
st.markdown("Discover your next favorite movie with AI-powered recommendations based on your taste.")

with st.form("movies_form"):
    movies_text = st.text_area(
        "Your favorite movies",
        value=board.movies_text,
        placeholder="e.g. Heat, Alien (1979), Spirited Away",
        help="Separate movies with commas",
    )
    submitted = st.form_submit_button("Get Recommendations", type="primary")

if submitted:
    if not movies_text.strip():
        st.warning("Please enter at least one movie.")
    else:
        exclude = board.start_search(movies_text)
        fetch_batch(exclude, "Failed to get recommendations. Please try again.")

if board.error:
    st.error(board.error)

if not board.has_results:
    if st.session_state["trending"] is None:
        try:
            st.session_state["trending"] = get_trending()
        except Exception as e:
            logger.error("Error fetching trending movies: %s", e)
            st.session_state["trending"] = []
    if not compact or st.toggle("Show trending", key="show_trending"):
        render_trending(st.session_state["trending"], page_size=2 if compact else 5)
else:
    st.subheader("Recommended for you")
    for line in board.lines:
        render_movie_card(board, line, compact=compact)

    if st.button("Get more movies", use_container_width=True):
        fetch_batch(board.exclusions(), "Failed to get more recommendations. Please try again.")
        st.rerun()

if st.session_state["modal_movie"] and not compact:
    line = st.session_state["modal_movie"]
    st.session_state["modal_movie"] = None
    show_movie_modal(board, line)

st.caption("Movie data provided by TMDB. This product uses the TMDB API but is not endorsed or certified by TMDB.")
