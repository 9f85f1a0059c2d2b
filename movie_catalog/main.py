from contextlib import asynccontextmanager
from dataclasses import asdict
from typing import Optional

from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, Field
from starlette import status
from starlette.responses import JSONResponse

from movie_catalog.catalog import MovieCatalog
from movie_catalog.config import MAX_RATING, MIN_RATING, SEED_CATALOG
from movie_catalog.exceptions import MovieNotFound, ValidationError
from movie_catalog.logger import logger
from movie_catalog.models import Movie, MovieDraft
from movie_catalog.seed import SEED_MOVIES
from movie_catalog.utils import timed
from movie_catalog.view import next_carousel_index


class MovieParams(BaseModel):
    title: str
    year: int = Field(ge=1900, le=2100)
    genre: str
    description: str
    poster: str
    platforms: list[str]


class ReviewParams(BaseModel):
    rating: float = Field(ge=MIN_RATING, le=MAX_RATING)
    comment: str
    author: Optional[str] = None


class LoginParams(BaseModel):
    email: str
    password: str


class RegisterParams(BaseModel):
    name: str
    email: str
    password: str


class CategoryParams(BaseModel):
    category: str


class FavoritesViewParams(BaseModel):
    showing: bool


def movie_to_json(movie: Movie, catalog: MovieCatalog) -> dict:
    data = asdict(movie)
    data["platforms"] = list(movie.platforms)
    data["reviews"] = [review._asdict() for review in movie.reviews]
    data["favorite"] = catalog.is_favorite(movie.id)
    return data


def session_to_json(catalog: MovieCatalog) -> dict:
    return catalog.session._asdict()


def view_to_json(catalog: MovieCatalog) -> dict:
    return {**catalog.view._asdict(), "title": catalog.title()}


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    app.state.catalog.dispose()


def create_app(catalog: Optional[MovieCatalog] = None) -> FastAPI:
    app = FastAPI(lifespan=lifespan)
    if catalog is None:
        catalog = MovieCatalog.create(SEED_MOVIES if SEED_CATALOG else ())
    app.state.catalog = catalog

    @app.exception_handler(ValidationError)
    async def validation_error(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse({"error": str(exc)}, status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = "; ".join(error["msg"] for error in exc.errors())
        return JSONResponse({"error": errors}, status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(MovieNotFound)
    async def movie_not_found(request: Request, exc: MovieNotFound) -> JSONResponse:
        return JSONResponse({"error": str(exc)}, status_code=status.HTTP_404_NOT_FOUND)

    @app.get("/movies")
    @timed
    async def visible_movies(request: Request) -> JSONResponse:
        catalog: MovieCatalog = request.app.state.catalog
        movies = [movie_to_json(movie, catalog) for movie in catalog.visible()]
        return JSONResponse({**view_to_json(catalog), "movies": movies})

    @app.get("/movies/all")
    @timed
    async def all_movies(request: Request) -> JSONResponse:
        catalog: MovieCatalog = request.app.state.catalog
        return JSONResponse([movie_to_json(movie, catalog) for movie in catalog.get_all()])

    @app.get("/movies/{movie_id}")
    async def get_movie(request: Request, movie_id: str) -> JSONResponse:
        catalog: MovieCatalog = request.app.state.catalog
        return JSONResponse(movie_to_json(catalog.get_by_id(movie_id), catalog))

    @app.post("/movies")
    @timed
    async def add_movie(request: Request, body: MovieParams) -> JSONResponse:
        catalog: MovieCatalog = request.app.state.catalog
        draft = MovieDraft(
            title=body.title,
            year=body.year,
            genre=body.genre,
            description=body.description,
            poster=body.poster,
            platforms=tuple(body.platforms),
        )
        movie = catalog.add_movie(draft)
        return JSONResponse(
            movie_to_json(movie, catalog), status_code=status.HTTP_201_CREATED
        )

    @app.post("/movies/{movie_id}/reviews")
    @timed
    async def add_review(request: Request, movie_id: str, body: ReviewParams) -> JSONResponse:
        catalog: MovieCatalog = request.app.state.catalog
        session = catalog.session
        author = session.display_name if session.authenticated else body.author
        if not author:
            raise ValidationError("review author is missing")
        movie = catalog.add_review(movie_id, author, body.rating, body.comment)
        return JSONResponse(
            movie_to_json(movie, catalog), status_code=status.HTTP_201_CREATED
        )

    @app.post("/favorites/{movie_id}")
    async def toggle_favorite(request: Request, movie_id: str) -> JSONResponse:
        catalog: MovieCatalog = request.app.state.catalog
        favorite = catalog.toggle_favorite(movie_id)
        return JSONResponse({"movie_id": movie_id, "favorite": favorite})

    @app.get("/favorites")
    async def favorites(request: Request) -> JSONResponse:
        catalog: MovieCatalog = request.app.state.catalog
        return JSONResponse([movie_to_json(movie, catalog) for movie in catalog.favorite_movies()])

    @app.post("/login")
    async def login(request: Request, body: LoginParams) -> JSONResponse:
        catalog: MovieCatalog = request.app.state.catalog
        catalog.login(body.email, body.password)
        return JSONResponse(session_to_json(catalog))

    @app.post("/register")
    async def register(request: Request, body: RegisterParams) -> JSONResponse:
        catalog: MovieCatalog = request.app.state.catalog
        catalog.register(body.name, body.email, body.password)
        return JSONResponse(session_to_json(catalog))

    @app.post("/logout")
    async def logout(request: Request) -> JSONResponse:
        catalog: MovieCatalog = request.app.state.catalog
        catalog.logout()
        return JSONResponse(session_to_json(catalog))

    @app.get("/session")
    async def session(request: Request) -> JSONResponse:
        return JSONResponse(session_to_json(request.app.state.catalog))

    @app.put("/view/category")
    async def set_category(request: Request, body: CategoryParams) -> JSONResponse:
        catalog: MovieCatalog = request.app.state.catalog
        catalog.set_category(body.category)
        return JSONResponse(view_to_json(catalog))

    @app.put("/view/favorites")
    async def set_showing_favorites(request: Request, body: FavoritesViewParams) -> JSONResponse:
        catalog: MovieCatalog = request.app.state.catalog
        catalog.set_showing_favorites(body.showing)
        return JSONResponse(view_to_json(catalog))

    @app.get("/carousel/next")
    async def carousel_next(
        request: Request,
        current: int = Query(ge=0, default=0),
        step: int = Query(default=1),
    ) -> JSONResponse:
        movies = request.app.state.catalog.get_all()
        index = next_carousel_index(current, len(movies), step)
        movie_id = movies[index].id if movies else None
        return JSONResponse({"index": index, "movie_id": movie_id})

    logger.info(f"catalog app ready with {len(catalog.get_all())} movies")
    return app


app = create_app()
