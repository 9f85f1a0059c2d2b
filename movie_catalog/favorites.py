"""
Per-session set of favorite movie ids.

Ids are not checked against the catalog; the view selector only ever
joins favorites with movies that exist.
"""

from movie_catalog.logger import logger


class FavoritesRegistry:
    def __init__(self):
        self._movie_ids: set[str] = set()

    def toggle(self, movie_id: str) -> bool:
        """Flip membership of `movie_id` and return whether it is now a favorite."""
        if movie_id in self._movie_ids:
            self._movie_ids.discard(movie_id)
            logger.info(f"removed movie {movie_id} from favorites")
            return False
        self._movie_ids.add(movie_id)
        logger.info(f"added movie {movie_id} to favorites")
        return True

    def is_favorite(self, movie_id: str) -> bool:
        return movie_id in self._movie_ids

    def all(self) -> frozenset[str]:
        return frozenset(self._movie_ids)

    def clear(self) -> None:
        self._movie_ids.clear()

    def __len__(self):
        return len(self._movie_ids)
