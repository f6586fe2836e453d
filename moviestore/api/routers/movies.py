# moviestore/api/routers/movies.py

import json
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import JSONResponse

from moviestore.api.schemas import ErrorResponse, MessageResponse
from moviestore.core.config import get_settings
from moviestore.core.logger import setup_logger
from moviestore.core.models.movie import Movie
from moviestore.core.store import MovieNotFound, MovieStore
from moviestore.core.validation import validate_movie, validate_partial_movie

logger = setup_logger(__name__, get_settings().log_level)

router = APIRouter(tags=["Movies"])

NOT_FOUND = "Movie not found"


def get_store(request: Request) -> MovieStore:
    return request.app.state.store


async def _read_json(request: Request) -> Any:
    """
    Parse the request body; an empty body counts as an empty object.
    Raises ValueError for bodies that are not UTF-8 JSON.
    """
    raw = await request.body()
    if not raw:
        return {}
    return json.loads(raw.decode("utf-8"))


def _bad_request(errors: dict) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": errors})


@router.get("", response_model=List[Movie], name="movies.list")
def list_movies(
    genre: Optional[str] = Query(None),
    store: MovieStore = Depends(get_store),
):
    """List all movies, or only those tagged with ``genre`` (case-insensitive)."""
    return store.list(genre)


@router.get("/{movie_id}", response_model=Movie, name="movies.get")
def get_movie(movie_id: str, store: MovieStore = Depends(get_store)):
    try:
        return store.get(movie_id)
    except MovieNotFound:
        raise HTTPException(404, NOT_FOUND)


@router.post(
    "",
    response_model=Movie,
    status_code=201,
    responses={400: {"model": ErrorResponse}},
    name="movies.create",
)
async def create_movie(request: Request, store: MovieStore = Depends(get_store)):
    try:
        payload = await _read_json(request)
    except ValueError as e:
        return _bad_request({"body": f"Malformed JSON: {e}"})

    result = validate_movie(payload)
    if not result.success:
        logger.info("Rejected new movie: %s", result.errors)
        return _bad_request(result.errors)

    movie = store.create(result.data)
    logger.info("Created movie %s (%s)", movie.title, movie.id)
    return movie


@router.patch(
    "/{movie_id}",
    response_model=Movie,
    responses={400: {"model": ErrorResponse}, 404: {"model": MessageResponse}},
    name="movies.update",
)
async def update_movie(
    movie_id: str,
    request: Request,
    store: MovieStore = Depends(get_store),
):
    try:
        payload = await _read_json(request)
    except ValueError as e:
        return _bad_request({"body": f"Malformed JSON: {e}"})

    result = validate_partial_movie(payload)
    if not result.success:
        logger.info("Rejected update for %s: %s", movie_id, result.errors)
        return _bad_request(result.errors)

    try:
        movie = store.update(movie_id, result.data)
    except MovieNotFound:
        raise HTTPException(404, NOT_FOUND)
    logger.info("Updated movie %s: %s", movie_id, sorted(result.data))
    return movie


@router.delete(
    "/{movie_id}",
    response_model=MessageResponse,
    responses={404: {"model": MessageResponse}},
    name="movies.delete",
)
def delete_movie(movie_id: str, store: MovieStore = Depends(get_store)):
    try:
        store.delete(movie_id)
    except MovieNotFound:
        raise HTTPException(404, NOT_FOUND)
    logger.info("Deleted movie %s", movie_id)
    return MessageResponse(message="Movie deleted")
