"""
Data models and types.
"""

from dataclasses import dataclass, field
from typing import NamedTuple, Optional

from movie_catalog.config import ALL_CATEGORIES


class Review(NamedTuple):
    id: str
    user_name: str
    rating: float
    comment: str
    date: str


@dataclass(frozen=True)
class MovieDraft:
    """A movie submitted for publishing, before it gets an id and a rating."""
    title: str
    year: int
    genre: str
    description: str
    poster: str
    platforms: tuple[str, ...]
    reviews: tuple[Review, ...] = ()


@dataclass(frozen=True)
class Movie:
    id: str
    title: str
    year: int
    genre: str
    description: str
    poster: str
    platforms: tuple[str, ...]
    reviews: tuple[Review, ...] = field(default=())
    rating: float = 0.0


class Session(NamedTuple):
    authenticated: bool = False
    display_name: Optional[str] = None


ANONYMOUS = Session()


class ViewState(NamedTuple):
    category: str = ALL_CATEGORIES
    showing_favorites: bool = False
