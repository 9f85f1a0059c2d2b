"""
The catalog object handed to the presentation layer.

It owns the store, favorites, session and view state and is the only
entry point for mutations.
"""

from typing import Iterable, Optional

from movie_catalog.exceptions import ValidationError
from movie_catalog.favorites import FavoritesRegistry
from movie_catalog.logger import logger
from movie_catalog.models import Movie, MovieDraft, Session, ViewState
from movie_catalog.session import SessionManager
from movie_catalog.store import CatalogStore
from movie_catalog.view import select_visible, validate_category, view_title


class MovieCatalog:
    def __init__(
        self,
        store: Optional[CatalogStore] = None,
        favorites: Optional[FavoritesRegistry] = None,
    ):
        self.store = store or CatalogStore()
        self.favorites = favorites or FavoritesRegistry()
        self.sessions = SessionManager(self.favorites)
        self.view = ViewState()

    @classmethod
    def create(cls, drafts: Iterable[MovieDraft] = ()) -> "MovieCatalog":
        return cls(CatalogStore.create(drafts))

    # reads

    def get_all(self) -> list[Movie]:
        return self.store.get_all()

    def get_by_id(self, movie_id: str) -> Movie:
        return self.store.get_by_id(movie_id)

    def selected_movie(self, movie_id: Optional[str]) -> Optional[Movie]:
        """Current record of the movie open in a detail view, if it still exists."""
        if movie_id is None or movie_id not in self.store:
            return None
        return self.store.get_by_id(movie_id)

    def is_favorite(self, movie_id: str) -> bool:
        return self.favorites.is_favorite(movie_id)

    def favorite_movies(self) -> list[Movie]:
        return select_visible(
            self.store.get_all(), self.favorites.all(), ViewState(showing_favorites=True)
        )

    @property
    def session(self) -> Session:
        return self.sessions.session

    def visible(self) -> list[Movie]:
        return select_visible(self.store.get_all(), self.favorites.all(), self.view)

    def title(self) -> str:
        return view_title(self.view)

    # write intents

    def add_movie(self, draft: MovieDraft) -> Movie:
        return self.store.add_movie(draft)

    def add_review(
        self, movie_id: str, author_name: str, rating: float, comment: str
    ) -> Movie:
        return self.store.add_review(movie_id, author_name, rating, comment)

    def toggle_favorite(self, movie_id: str) -> bool:
        # favorites only exist inside an authenticated session
        if not self.session.authenticated:
            logger.warning(f"anonymous favorite toggle for movie {movie_id}")
            raise ValidationError("log in to manage favorites")
        return self.favorites.toggle(movie_id)

    def login(self, identifier: str, secret: str) -> Session:
        return self.sessions.login(identifier, secret)

    def register(self, display_name: str, identifier: str, secret: str) -> Session:
        return self.sessions.register(display_name, identifier, secret)

    def logout(self) -> Session:
        return self.sessions.logout()

    def set_category(self, category: str) -> ViewState:
        # picking a category leaves the favorites view
        self.view = ViewState(category=validate_category(category), showing_favorites=False)
        logger.debug(f"view set to category {category}")
        return self.view

    def set_showing_favorites(self, showing: bool) -> ViewState:
        self.view = self.view._replace(showing_favorites=bool(showing))
        logger.debug(f"showing favorites = {self.view.showing_favorites}")
        return self.view

    def dispose(self) -> None:
        self.sessions.logout()
        self.store.dispose()
        self.view = ViewState()
