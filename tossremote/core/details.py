"""
Extraction of display fields from a TMDB movie detail payload.

Input is the response of /movie/{id} with credits, videos and
watch/providers appended. Missing optional sections degrade to empty
values instead of failing the request.
"""

from typing import Any, Dict, List, Optional

IMAGE_BASE_URL = "https://image.tmdb.org/t/p"
TMDB_MOVIE_URL = "https://www.themoviedb.org/movie"
YOUTUBE_WATCH_URL = "https://www.youtube.com/watch?v="

MAX_CAST = 6
MAX_STREAMING = 5
CARD_CAST = 3
CARD_STREAMING = 3
WATCH_REGION = "US"

MovieDetail = Dict[str, Any]
MovieDescription = Dict[str, Any]


def image_url(path: Optional[str], size: str = "w500") -> Optional[str]:
    """Full TMDB image URL for a poster/backdrop path, or None."""
    if not path:
        return None
    return f"{IMAGE_BASE_URL}/{size}{path}"


def extract_cast(movie: Dict[str, Any], limit: int = MAX_CAST) -> List[str]:
    cast = (movie.get("credits") or {}).get("cast") or []
    return [member["name"] for member in cast[:limit] if member.get("name")]


def extract_director(movie: Dict[str, Any]) -> str:
    crew = (movie.get("credits") or {}).get("crew") or []
    for person in crew:
        if person.get("job") == "Director":
            return person.get("name") or ""
    return ""


def extract_genres(movie: Dict[str, Any]) -> List[str]:
    return [g["name"] for g in movie.get("genres") or [] if g.get("name")]


def extract_trailer(movie: Dict[str, Any]) -> Optional[str]:
    """URL of the first YouTube trailer, if any."""
    videos = (movie.get("videos") or {}).get("results") or []
    for video in videos:
        if video.get("type") == "Trailer" and video.get("site") == "YouTube" and video.get("key"):
            return f"{YOUTUBE_WATCH_URL}{video['key']}"
    return None


def extract_streaming(movie: Dict[str, Any], limit: int = MAX_STREAMING) -> List[str]:
    """Flat-rate (subscription) providers in the US region."""
    providers = movie.get("watch/providers") or {}
    region = (providers.get("results") or {}).get(WATCH_REGION) or {}
    flatrate = region.get("flatrate") or []
    return [p["provider_name"] for p in flatrate[:limit] if p.get("provider_name")]


def extract_year(movie: Dict[str, Any]) -> Optional[int]:
    release_date = movie.get("release_date") or ""
    if len(release_date) >= 4 and release_date[:4].isdigit():
        return int(release_date[:4])
    return None


def build_detail(movie: Dict[str, Any]) -> MovieDetail:
    """
    Build the full detail record shown in the movie modal.

    Args:
        movie: TMDB movie payload with appended credits/videos/providers

    Returns:
        Dict with title, description, poster/backdrop URLs, cast, director,
        genres, runtime, rating, year, streaming, trailer and tmdb_url.
    """
    return {
        "title": movie.get("title") or "",
        "description": movie.get("overview") or "",
        "poster_path": image_url(movie.get("poster_path")),
        "backdrop_path": image_url(movie.get("backdrop_path"), size="w1280"),
        "cast": extract_cast(movie),
        "director": extract_director(movie),
        "genres": extract_genres(movie),
        "runtime": movie.get("runtime"),
        "rating": movie.get("vote_average"),
        "year": extract_year(movie),
        "streaming": extract_streaming(movie),
        "trailer": extract_trailer(movie),
        "tmdb_url": f"{TMDB_MOVIE_URL}/{movie.get('id')}",
    }


def format_runtime(minutes: Optional[int]) -> str:
    """90 -> "1h 30min"; unknown runtimes render as ""."""
    if not minutes:
        return ""
    return f"{minutes // 60}h {minutes % 60}min"


def format_summary(detail: MovieDetail) -> str:
    """Overview followed by the cast/rating/genre/runtime/streaming lines."""
    cast = ", ".join(detail["cast"][:CARD_CAST])
    rating = detail.get("rating") or 0
    streaming = detail["streaming"][:CARD_STREAMING]
    availability = ", ".join(streaming) if streaming else "Check streaming platforms"
    lines = [
        f"🎭 Cast: {cast}",
        f"⭐ Rating: {rating:.1f}/10",
        f"🎬 {', '.join(detail['genres'])}",
        f"⏱️ {format_runtime(detail.get('runtime'))}",
        f"🎬 Movie Availability: {availability}",
    ]
    return f"{detail['description']}\n\n" + "\n".join(lines)


def build_description(detail: MovieDetail) -> MovieDescription:
    """Compact card payload derived from a full detail record."""
    return {
        "title": detail["title"],
        "description": format_summary(detail),
        "poster_path": detail["poster_path"],
        "rating": detail.get("rating"),
        "streaming": detail["streaming"][:CARD_STREAMING],
        "tmdb_url": detail["tmdb_url"],
    }
