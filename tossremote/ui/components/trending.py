"""
Trending movies carousel component.
"""

import streamlit as st

from tossremote.core.details import image_url

PAGE_SIZE = 5


def render_trending(movies: list[dict], page_size: int = PAGE_SIZE) -> None:
    """
    Render a paged row of trending posters.

    Args:
        movies: Trending entries (id, title, poster_path, vote_average, release_date)
        page_size: Posters per page
    """
    if not movies:
        return

    offset = st.session_state.get("trending_offset", 0) % len(movies)
    st.subheader("🔥 Trending this week")

    nav_prev, _, nav_next = st.columns([1, 8, 1])
    with nav_prev:
        if st.button("◀", key="trending_prev", use_container_width=True):
            st.session_state["trending_offset"] = (offset - page_size) % len(movies)
            st.rerun()
    with nav_next:
        if st.button("▶", key="trending_next", use_container_width=True):
            st.session_state["trending_offset"] = (offset + page_size) % len(movies)
            st.rerun()

    visible = [movies[(offset + i) % len(movies)] for i in range(min(page_size, len(movies)))]
    for col, movie in zip(st.columns(len(visible)), visible):
        with col:
            poster = image_url(movie.get("poster_path"))
            if poster:
                st.image(poster, use_container_width=True)
            year = (movie.get("release_date") or "")[:4]
            st.markdown(f"**{movie.get('title', '')}**")
            caption = [year] if year else []
            if movie.get("vote_average"):
                caption.append(f"⭐ {movie['vote_average']:.1f}")
            if caption:
                st.caption(" | ".join(caption))
