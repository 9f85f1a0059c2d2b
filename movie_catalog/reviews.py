"""
Construction of new reviews.

Nothing here touches the catalog: appending the review and recomputing the
movie rating is done by the store.
"""

import numbers
from datetime import date
from typing import Callable, Optional

from movie_catalog.config import MAX_RATING, MIN_RATING
from movie_catalog.exceptions import ValidationError
from movie_catalog.logger import logger
from movie_catalog.models import Movie, Review
from movie_catalog.utils import format_long_date


def validate_rating(rating) -> float:
    # bool is an int subclass but never a meaningful score
    if isinstance(rating, bool) or not isinstance(rating, numbers.Real):
        raise ValidationError(f"rating must be a number, got {rating!r}")
    if not MIN_RATING <= rating <= MAX_RATING:
        raise ValidationError(
            f"rating must be between {MIN_RATING} and {MAX_RATING}, got {rating}"
        )
    return float(rating)


def validate_comment(comment: str) -> str:
    if not isinstance(comment, str) or not comment.strip():
        raise ValidationError("review comment is empty")
    return comment.strip()


class ReviewRegistry:
    """Assigns review ids and creation dates.

    Review ids are unique within their movie only. They come from a
    per-movie counter so they never depend on how many reviews exist.
    """

    def __init__(self, today: Optional[Callable[[], date]] = None):
        self._today = today or date.today
        self._next_ids: dict[str, int] = {}

    def create_review(
        self, movie: Movie, author_name: str, rating: float, comment: str
    ) -> Review:
        try:
            rating = validate_rating(rating)
            comment = validate_comment(comment)
        except ValidationError as exc:
            logger.warning(f"rejected review for movie {movie.id}: {exc}")
            raise

        next_id = self._next_ids.get(movie.id, len(movie.reviews) + 1)
        taken = {review.id for review in movie.reviews}
        while str(next_id) in taken:
            next_id += 1
        self._next_ids[movie.id] = next_id + 1
        return Review(
            id=str(next_id),
            user_name=author_name,
            rating=rating,
            comment=comment,
            date=format_long_date(self._today()),
        )

    def clear(self) -> None:
        self._next_ids.clear()
