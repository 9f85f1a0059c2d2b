"""
Projection of the catalog into the list of movies currently on screen.

All functions here are pure and are recomputed from the current store
state on every read, so the visible list can never go stale.
"""

from typing import Iterable, Sequence

from movie_catalog.config import (ALL_CATEGORIES, ALL_MOVIES_LABEL,
                                  FAVORITES_LABEL, GENRES)
from movie_catalog.exceptions import ValidationError
from movie_catalog.models import Movie, ViewState


def validate_category(category: str) -> str:
    if category != ALL_CATEGORIES and category not in GENRES:
        raise ValidationError(f"unknown category: {category}")
    return category


def select_visible(
    movies: Sequence[Movie], favorites: Iterable[str], view: ViewState
) -> list[Movie]:
    """Movies shown for `view`, always in catalog insertion order.

    The favorites toggle takes priority over the stored category.
    """
    if view.showing_favorites:
        favorite_ids = set(favorites)
        return [movie for movie in movies if movie.id in favorite_ids]
    if view.category == ALL_CATEGORIES:
        return list(movies)
    return [movie for movie in movies if movie.genre == view.category]


def view_title(view: ViewState) -> str:
    if view.showing_favorites:
        return FAVORITES_LABEL
    if view.category == ALL_CATEGORIES:
        return ALL_MOVIES_LABEL
    return view.category


def next_carousel_index(current: int, length: int, step: int = 1) -> int:
    """Index of the featured movie after moving `step` slots.

    Wraps in both directions and returns 0 for an empty list, so a list
    that shrank under the carousel never yields an out-of-range index.
    """
    if length <= 0:
        return 0
    return (current + step) % length
