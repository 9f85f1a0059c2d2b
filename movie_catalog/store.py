"""
Authoritative in-memory catalog of movies.
"""

import itertools
import threading
from dataclasses import replace
from typing import Iterable, Optional

from movie_catalog.config import GENRES, PLATFORMS
from movie_catalog.exceptions import MovieNotFound, ValidationError
from movie_catalog.logger import logger
from movie_catalog.models import Movie, MovieDraft
from movie_catalog.rating import aggregate
from movie_catalog.reviews import ReviewRegistry
from movie_catalog.utils import timed


def _clean_platforms(platforms: Iterable[str]) -> tuple[str, ...]:
    # keep first-seen order, drop repeated tags
    cleaned = tuple(dict.fromkeys(platforms))
    if not cleaned:
        raise ValidationError("a movie needs at least one streaming platform")
    unknown = [platform for platform in cleaned if platform not in PLATFORMS]
    if unknown:
        raise ValidationError(f"unknown streaming platforms: {', '.join(unknown)}")
    return cleaned


def _validate_draft(draft: MovieDraft) -> tuple[str, ...]:
    if draft.genre not in GENRES:
        raise ValidationError(f"unknown genre: {draft.genre}")
    return _clean_platforms(draft.platforms)


class CatalogStore:
    """Single source of truth for movies, in insertion order.

    Movie records are immutable. Every mutation builds a replacement record
    and swaps it in while holding the store lock, so a reader sees a movie
    either before or after a review was added, never in between.
    """

    def __init__(self, review_registry: Optional[ReviewRegistry] = None):
        self._movies: dict[str, Movie] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()
        self.review_registry = review_registry or ReviewRegistry()

    @classmethod
    @timed
    def create(
        cls,
        drafts: Iterable[MovieDraft] = (),
        review_registry: Optional[ReviewRegistry] = None,
    ) -> "CatalogStore":
        store = cls(review_registry)
        for draft in drafts:
            store.add_movie(draft)
        return store

    def add_movie(self, draft: MovieDraft) -> Movie:
        try:
            platforms = _validate_draft(draft)
        except ValidationError as exc:
            logger.warning(f"rejected movie {draft.title!r}: {exc}")
            raise

        reviews = tuple(draft.reviews)
        with self._lock:
            movie = Movie(
                id=str(next(self._ids)),
                title=draft.title,
                year=draft.year,
                genre=draft.genre,
                description=draft.description,
                poster=draft.poster,
                platforms=platforms,
                reviews=reviews,
                rating=aggregate(reviews),
            )
            self._movies[movie.id] = movie
        logger.info(f"added movie {movie.id} - {movie.title} ({movie.year})")
        return movie

    def add_review(
        self, movie_id: str, author_name: str, rating: float, comment: str
    ) -> Movie:
        with self._lock:
            movie = self._movies.get(movie_id)
            if movie is None:
                logger.warning(f"review for unknown movie {movie_id}")
                raise MovieNotFound(movie_id)
            review = self.review_registry.create_review(
                movie, author_name, rating, comment
            )
            reviews = movie.reviews + (review,)
            movie = replace(movie, reviews=reviews, rating=aggregate(reviews))
            self._movies[movie_id] = movie
        logger.info(
            f"added review {review.id} to movie {movie_id} - new rating = {movie.rating}"
        )
        return movie

    def get_all(self) -> list[Movie]:
        with self._lock:
            return list(self._movies.values())

    def get_by_id(self, movie_id: str) -> Movie:
        movie = self._movies.get(movie_id)
        if movie is None:
            raise MovieNotFound(movie_id)
        return movie

    def __contains__(self, movie_id: str) -> bool:
        return movie_id in self._movies

    def __len__(self):
        return len(self._movies)

    def dispose(self) -> None:
        with self._lock:
            self._movies.clear()
            self.review_registry.clear()
        logger.info("catalog store disposed")
