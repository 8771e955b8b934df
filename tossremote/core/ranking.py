"""
Ranking of TMDB search candidates against a parsed recommendation line.
"""

from typing import Any, Dict, List


def candidate_year(candidate: Dict[str, Any]) -> str:
    """Release year of a search result, or "" if TMDB has no release date."""
    release_date = candidate.get("release_date") or ""
    return release_date[:4]


def match_score(candidate: Dict[str, Any], title: str, year: str = "") -> int:
    """
    Score how well a candidate matches the requested title and year.

    An exact (case-insensitive) title match is worth 2, an exact year match 1.
    The year only counts when one was requested.
    """
    score = 0
    if (candidate.get("title") or "").lower() == title.lower():
        score += 2
    if year and candidate_year(candidate) == year:
        score += 1
    return score


def popularity(candidate: Dict[str, Any]) -> float:
    """vote_count x vote_average, with missing values treated as zero."""
    return (candidate.get("vote_count") or 0) * (candidate.get("vote_average") or 0)


def rank_candidates(
    candidates: List[Dict[str, Any]],
    title: str,
    year: str = "",
) -> List[Dict[str, Any]]:
    """
    Order search candidates best first.

    Args:
        candidates: TMDB search results
        title: Title parsed from the recommendation line (not the cleaned one)
        year: Parsed year, or "" if unknown

    Returns:
        New list sorted by match score, then popularity, both descending.
        Equal candidates keep TMDB's relevance order.
    """
    return sorted(
        candidates,
        key=lambda c: (match_score(c, title, year), popularity(c)),
        reverse=True,
    )
