"""
Errors raised by catalog operations.

Every error is raised before any state is touched, so the caller can
simply retry with corrected input.
"""


class CatalogError(Exception):
    pass


class ValidationError(CatalogError, ValueError):
    """Malformed input to a catalog, review, session or view operation."""


class MovieNotFound(CatalogError, KeyError):
    def __init__(self, movie_id: str):
        super().__init__(movie_id)
        self.movie_id = movie_id

    def __str__(self) -> str:
        return f"movie ID {self.movie_id} not found"
