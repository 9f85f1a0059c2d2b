"""
Catalog settings and closed enumerations.
"""

import os

GENRES = (
    "Action",
    "Drama",
    "Science Fiction",
    "Comedy",
    "Horror",
    "Romance",
)
PLATFORMS = ("Netflix", "Prime Video", "HBO")

# special category value that disables genre filtering
ALL_CATEGORIES = "all"
ALL_MOVIES_LABEL = "All Movies"
FAVORITES_LABEL = "My Favorites"

MIN_RATING = 1
MAX_RATING = 10

DEBUG = bool(os.environ.get("DEBUG"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper()
SEED_CATALOG = os.environ.get("SEED_CATALOG", "1") not in ("0", "false", "no")
