"""
Simulated authentication.

Credentials are never checked: any non-empty identifier logs in. Logging
out clears the favorites of the session.
"""

from movie_catalog.exceptions import ValidationError
from movie_catalog.favorites import FavoritesRegistry
from movie_catalog.logger import logger
from movie_catalog.models import ANONYMOUS, Session


def display_name_from_identifier(identifier: str) -> str:
    """Local part of an email-like identifier, or the whole identifier when that part is empty."""
    local_part = identifier.split("@", 1)[0].strip()
    return local_part or identifier


class SessionManager:
    def __init__(self, favorites: FavoritesRegistry):
        self.favorites = favorites
        self.session = ANONYMOUS

    @property
    def authenticated(self) -> bool:
        return self.session.authenticated

    def login(self, identifier: str, secret: str) -> Session:
        if not identifier or not identifier.strip():
            raise ValidationError("login identifier is empty")
        return self._authenticate(display_name_from_identifier(identifier.strip()))

    def register(self, display_name: str, identifier: str, secret: str) -> Session:
        if not identifier or not identifier.strip():
            raise ValidationError("register identifier is empty")
        if not display_name or not display_name.strip():
            raise ValidationError("display name is empty")
        return self._authenticate(display_name.strip())

    def logout(self) -> Session:
        if self.session.authenticated:
            logger.info(f"logging out {self.session.display_name}")
        self.favorites.clear()
        self.session = ANONYMOUS
        return self.session

    def _authenticate(self, display_name: str) -> Session:
        self.session = Session(authenticated=True, display_name=display_name)
        logger.info(f"storing user {display_name} in session")
        return self.session
