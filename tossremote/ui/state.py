"""
Client-side view state for the recommendation page.

Kept free of Streamlit so the state transitions can be exercised directly;
the page stores one RecommendationBoard in st.session_state.

Every per-movie map is keyed by the literal recommendation line, so two
differently formatted lines for the same movie are separate entries.
"""

import logging
import time
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional

from tossremote.core.titles import dedupe_lines, split_lines, title_key

logger = logging.getLogger(__name__)

POSTER_DELAY_SECONDS = 0.2
FAILED_DESCRIPTION = "Failed to load description."
FAILED_DETAILS = "Failed to load movie details."


class PanelStatus(str, Enum):
    """Lifecycle of a line's detail panel."""

    UNFETCHED = "unfetched"
    LOADING = "loading"
    SHOWN = "shown"
    HIDDEN = "hidden"


def parse_input_movies(text: str) -> List[str]:
    """Split the comma-separated input box into trimmed, non-empty titles."""
    if not text or not text.strip():
        return []
    return [movie.strip() for movie in text.split(",") if movie.strip()]


class RecommendationBoard:
    """
    Everything the page knows about the current search.

    Usage:
        board = RecommendationBoard()
        exclude = board.start_search("Heat, Alien")
        board.add_batch(api_client.recommend(board.movies_text, exclude))
        if board.toggle_details(line):
            board.store_description(line, api_client.get_description(line))
    """

    def __init__(self):
        self._reset()

    def _reset(self) -> None:
        self.movies_text = ""
        self.lines: List[str] = []
        self.previous_movies: List[str] = []
        self.descriptions: Dict[str, Dict[str, Any]] = {}
        self.panels: Dict[str, PanelStatus] = {}
        self.details: Dict[str, Dict[str, Any]] = {}
        self.loading_details: Dict[str, bool] = {}
        self.posters: Dict[str, str] = {}
        self.loading_posters: Dict[str, bool] = {}
        self.ratings: Dict[str, float] = {}
        self.error: Optional[str] = None

    @property
    def input_movies(self) -> List[str]:
        return parse_input_movies(self.movies_text)

    @property
    def has_results(self) -> bool:
        return bool(self.lines)

    def start_search(self, movies_text: str) -> List[str]:
        """
        Discard the previous search and remember the new input.

        Returns:
            The movies to exclude from the first batch (the input itself).
        """
        self._reset()
        self.movies_text = movies_text
        return self.input_movies

    def exclusions(self) -> List[str]:
        """Input movies plus every line shown so far, without duplicates."""
        return list(dict.fromkeys(self.input_movies + self.previous_movies))

    def add_batch(self, text: str) -> List[str]:
        """
        Record a batch of recommendations.

        The first batch seeds the exclusion history with the input movies.
        Later batches are appended below the lines already shown; lines
        whose title is already on the board are skipped.

        Returns:
            The lines that were added to the board.
        """
        batch = dedupe_lines(split_lines(text))
        if not self.previous_movies:
            self.previous_movies = list(self.input_movies)
        self.previous_movies.extend(batch)

        shown = {title_key(line) for line in self.lines}
        added = [line for line in batch if title_key(line) not in shown]
        self.lines.extend(added)
        return added

    def status(self, line: str) -> PanelStatus:
        return self.panels.get(line, PanelStatus.UNFETCHED)

    def is_expanded(self, line: str) -> bool:
        return self.status(line) is PanelStatus.SHOWN

    def toggle_details(self, line: str) -> bool:
        """
        Handle a click on a line's details toggle.

        Returns:
            True if the caller must fetch the description; False when the
            panel was toggled from cache or a fetch is already running.
        """
        status = self.status(line)
        if status is PanelStatus.LOADING:
            return False
        if line in self.descriptions:
            self.panels[line] = PanelStatus.HIDDEN if status is PanelStatus.SHOWN else PanelStatus.SHOWN
            return False
        self.panels[line] = PanelStatus.LOADING
        return True

    def _remember_description(self, line: str, data: Dict[str, Any]) -> None:
        self.descriptions[line] = data
        if data.get("poster_path"):
            self.posters[line] = data["poster_path"]
        if data.get("rating") is not None:
            self.ratings[line] = data["rating"]

    def store_description(self, line: str, data: Dict[str, Any]) -> None:
        """A requested description arrived: cache it and open the panel."""
        self._remember_description(line, data)
        self.panels[line] = PanelStatus.SHOWN

    def fail_description(self, line: str) -> None:
        """Show a placeholder instead of blocking the page."""
        self.descriptions[line] = {
            "title": line,
            "description": FAILED_DESCRIPTION,
            "poster_path": None,
        }
        self.panels[line] = PanelStatus.SHOWN

    def needs_details(self, line: str) -> bool:
        """Whether the modal must fetch details (not cached, not in flight)."""
        return line not in self.details and not self.loading_details.get(line)

    def begin_details(self, line: str) -> None:
        self.loading_details[line] = True

    def store_details(self, line: str, data: Dict[str, Any]) -> None:
        self.details[line] = data
        self.loading_details[line] = False

    def fail_details(self, line: str) -> None:
        self.details[line] = {
            "title": line.split(" (")[0],
            "description": FAILED_DETAILS,
            "poster_path": None,
        }
        self.loading_details[line] = False

    def load_poster(self, line: str, fetch: Callable[[str], Dict[str, Any]]) -> bool:
        """
        Fetch the description of one line for its poster and rating.

        Lines with a cached description are skipped even when it had no poster.

        Returns:
            True if a request was made.
        """
        if line in self.posters or line in self.descriptions or self.loading_posters.get(line):
            return False
        self.loading_posters[line] = True
        try:
            self._remember_description(line, fetch(line))
        except Exception as e:
            logger.warning("Failed to load poster for %s: %s", line, e)
        finally:
            self.loading_posters[line] = False
        return True


def load_all_posters(
    board: RecommendationBoard,
    lines: Iterable[str],
    fetch: Callable[[str], Dict[str, Any]],
    delay: float = POSTER_DELAY_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """
    Load posters one at a time with a fixed pause between requests.

    Returns:
        Number of requests made.
    """
    lines = list(lines)
    logger.info("Loading posters for %d movies", len(lines))
    requested = 0
    for i, line in enumerate(lines):
        if board.load_poster(line, fetch):
            requested += 1
        if i < len(lines) - 1:
            sleep(delay)
    logger.info("Finished loading posters (%d requests)", requested)
    return requested
