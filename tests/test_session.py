import pytest

from movie_catalog.exceptions import ValidationError
from movie_catalog.favorites import FavoritesRegistry
from movie_catalog.models import ANONYMOUS, Session
from movie_catalog.session import SessionManager


def test_starts_anonymous():
    manager = SessionManager(FavoritesRegistry())
    assert manager.session == ANONYMOUS
    assert manager.session.display_name is None
    assert not manager.authenticated


def test_login_uses_local_part():
    manager = SessionManager(FavoritesRegistry())
    assert manager.login("ana@example.com", "anything") == Session(True, "ana")


def test_login_without_at_uses_whole_identifier():
    manager = SessionManager(FavoritesRegistry())
    assert manager.login("ana", "x").display_name == "ana"


def test_login_splits_on_first_at():
    manager = SessionManager(FavoritesRegistry())
    assert manager.login("a@b@c", "x").display_name == "a"


def test_login_empty_identifier_rejected():
    manager = SessionManager(FavoritesRegistry())
    with pytest.raises(ValidationError):
        manager.login("  ", "x")
    assert manager.session == ANONYMOUS


def test_register_uses_display_name():
    manager = SessionManager(FavoritesRegistry())
    session = manager.register("Ana María", "ana@example.com", "secret")
    assert session == Session(True, "Ana María")


def test_register_empty_name_rejected():
    manager = SessionManager(FavoritesRegistry())
    with pytest.raises(ValidationError):
        manager.register("", "ana@example.com", "secret")


def test_logout_clears_favorites():
    favorites = FavoritesRegistry()
    manager = SessionManager(favorites)
    manager.login("ana@example.com", "anything")
    favorites.toggle("1")
    favorites.toggle("3")
    assert manager.logout() == ANONYMOUS
    assert favorites.all() == frozenset()


def test_logout_when_anonymous_still_clears():
    favorites = FavoritesRegistry()
    favorites.toggle("1")
    SessionManager(favorites).logout()
    assert len(favorites) == 0


def test_login_empty_local_part_keeps_identifier():
    manager = SessionManager(FavoritesRegistry())
    assert manager.login("@example.com", "x") == Session(True, "@example.com")
