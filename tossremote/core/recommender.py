"""
Chat-completion backed movie recommendations.

Builds a fixed prompt from the user's favorite movies, asks the model for
exactly ten "Title (Year) - Director" lines, and drops any line that names
a movie the user asked to exclude.
"""

import logging
from typing import Any, Iterable, List, Optional

import openai

from tossremote.core.exceptions import UpstreamError
from tossremote.core.titles import title_key

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-3.5-turbo"
TEMPERATURE = 0.7
MAX_TOKENS = 500
RECOMMENDATION_COUNT = 10

SYSTEM_PROMPT = (
    "You are a movie recommendation expert. Always format your responses "
    "consistently with exactly one movie per line, using the format: "
    "'Title (Year) - Director'"
)

USER_PROMPT = """Based on these movies: {movies}
{exclusions}
Please recommend {count} NEW and DIFFERENT movies (do not include any of the input movies) that match the genre mix, ratings, and time periods of the input movies. Consider the ratio of genres in each movie and include at least one movie that blends multiple genres from the input movies.

Format each recommendation exactly as: Title (Year) - Director
Example format:
The Godfather (1972) - Francis Ford Coppola
Inception (2010) - Christopher Nolan

Return exactly {count} movies, one per line, no additional text or explanations."""


def build_prompt(movies: str, exclude: Optional[Iterable[str]] = None) -> str:
    """Render the user prompt, listing excluded movies when there are any."""
    excluded = [m.strip() for m in exclude or [] if m and m.strip()]
    exclusions = ""
    if excluded:
        listed = "\n".join(f"- {m}" for m in excluded)
        exclusions = f"\nDo NOT recommend any of these movies, the user has already seen them:\n{listed}\n"
    return USER_PROMPT.format(movies=movies, exclusions=exclusions, count=RECOMMENDATION_COUNT)


def filter_excluded(text: str, exclude: Optional[Iterable[str]] = None) -> str:
    """
    Remove lines whose title matches an excluded movie.

    Titles are compared case-insensitively on the text before " (", so
    "heat (1995) - Michael Mann" is dropped when "Heat" is excluded.
    """
    excluded_keys = {title_key(m) for m in exclude or [] if m and m.strip()}
    if not excluded_keys:
        return text

    kept: List[str] = []
    for line in text.split("\n"):
        if line.strip() and title_key(line) in excluded_keys:
            logger.info("Dropping excluded recommendation: %s", line.strip())
            continue
        kept.append(line)
    return "\n".join(kept).strip()


class RecommendationRequester:
    """
    Requests recommendations from an OpenAI-compatible chat completion API.

    Usage:
        requester = RecommendationRequester(api_key)
        text = requester.recommend("Heat, Alien", exclude=["Heat", "Alien"])
    """

    def __init__(self, api_key: str, model: str = DEFAULT_MODEL, client: Any = None):
        self.model = model
        self.client = client or openai.OpenAI(api_key=api_key)

    def complete(self, prompt: str) -> str:
        """Send the prompt and return the raw completion text."""
        try:
            completion = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                temperature=TEMPERATURE,
                max_tokens=MAX_TOKENS,
            )
        except openai.APIStatusError as e:
            logger.error("Chat completion failed with status %s: %s", e.status_code, e.message)
            raise UpstreamError.from_status(e.status_code, e.message) from e
        except openai.APIError as e:
            logger.error("Chat completion failed: %s", e)
            raise UpstreamError.from_status(None, str(e)) from e
        return completion.choices[0].message.content or ""

    def recommend(self, movies: str, exclude: Optional[Iterable[str]] = None) -> str:
        """
        Get newline-delimited recommendations for a free-text movie list.

        Args:
            movies: The user's favorite movies, as typed
            exclude: Titles that must not appear in the answer

        Returns:
            Completion text with excluded titles removed. The line count is
            not enforced; whatever the model returned is passed through.
        """
        exclude = list(exclude or [])
        logger.info("Requesting recommendations (%d excluded titles)", len(exclude))
        text = self.complete(build_prompt(movies, exclude))
        return filter_excluded(text, exclude)
