"""
Movies the catalog starts with.
"""

from movie_catalog.models import MovieDraft, Review

SEED_MOVIES = [
    MovieDraft(
        title="Inception",
        year=2010,
        genre="Science Fiction",
        description="A thief who steals corporate secrets through dream-sharing "
        "technology is given the inverse task of planting an idea.",
        poster="https://image.tmdb.org/t/p/w500/9gk7adHYeDvHkCSEqAvQNLV5Uge.jpg",
        platforms=("Netflix", "HBO"),
        reviews=(
            Review("1", "Carlos", 9, "A masterpiece of modern cinema.", "15 January 2024"),
            Review("2", "María", 10, "Mind-bending from start to finish.", "20 January 2024"),
        ),
    ),
    MovieDraft(
        title="The Dark Knight",
        year=2008,
        genre="Action",
        description="Batman faces the Joker, a criminal mastermind who plunges "
        "Gotham into anarchy.",
        poster="https://image.tmdb.org/t/p/w500/qJ2tW6WMUDux911r6m7haRef0WH.jpg",
        platforms=("HBO", "Prime Video"),
        reviews=(
            Review("1", "Laura", 10, "The best superhero movie ever made.", "3 February 2024"),
        ),
    ),
    MovieDraft(
        title="The Shawshank Redemption",
        year=1994,
        genre="Drama",
        description="Two imprisoned men bond over a number of years, finding "
        "solace and eventual redemption through acts of common decency.",
        poster="https://image.tmdb.org/t/p/w500/q6y0Go1tsGEsmtFryDOJo3dEmqu.jpg",
        platforms=("Netflix",),
        reviews=(
            Review("1", "Pedro", 9, "Moving and hopeful.", "11 March 2024"),
            Review("2", "Ana", 8, "Great performances all around.", "12 March 2024"),
        ),
    ),
    MovieDraft(
        title="Superbad",
        year=2007,
        genre="Comedy",
        description="Two co-dependent high school seniors try to make the most "
        "of their last days before graduation.",
        poster="https://image.tmdb.org/t/p/w500/ek8e8txUyUwd2BNqj6lFEerJfbq.jpg",
        platforms=("Prime Video",),
    ),
    MovieDraft(
        title="The Conjuring",
        year=2013,
        genre="Horror",
        description="Paranormal investigators help a family terrorized by a dark "
        "presence in their farmhouse.",
        poster="https://image.tmdb.org/t/p/w500/wVYREutTvI2tmxr6ujrHT704wGF.jpg",
        platforms=("HBO",),
        reviews=(
            Review("1", "Sofía", 7, "Genuinely scary in places.", "30 April 2024"),
        ),
    ),
]
