# moviestore/main.py

import json
from contextlib import asynccontextmanager
from pathlib import Path
from typing import List, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from moviestore.api.routers import movies
from moviestore.core.config import get_settings
from moviestore.core.logger import setup_logger
from moviestore.core.models.movie import Movie
from moviestore.core.store import MovieStore

logger = setup_logger(__name__, get_settings().log_level)


def load_seed(path: Path) -> List[Movie]:
    """Read the initial collection; every record must satisfy the full schema."""
    with path.open(encoding="utf-8") as f:
        data = json.load(f)
    return [Movie.model_validate(item) for item in data]


def create_app(store: Optional[MovieStore] = None) -> FastAPI:
    """
    Build the API. When ``store`` is omitted the seed file from the
    settings is loaded at startup.
    """
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if store is None:
            seed = load_seed(settings.seed_file)
            app.state.store = MovieStore(seed)
            logger.info("Loaded %d movies from %s", len(seed), settings.seed_file)
        yield

    app = FastAPI(title="Movies API", lifespan=lifespan)
    if store is not None:
        app.state.store = store

    app.include_router(movies.router, prefix="/movies")

    @app.exception_handler(StarletteHTTPException)
    async def _message_error(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    # CORS headers for allowed origins
    allowed = set(settings.accepted_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.accepted_origins,
        allow_methods=["GET", "POST", "PATCH", "DELETE"],
        allow_headers=["Content-Type"],
    )

    # Added last so it runs before CORS: unknown origins never reach a route
    @app.middleware("http")
    async def _origin_guard(request: Request, call_next):
        origin = request.headers.get("origin")
        if origin and origin not in allowed:
            logger.warning("Blocked request from origin %s", origin)
            return JSONResponse(status_code=403, content={"message": "Not allowed by CORS"})
        return await call_next(request)

    return app


app = create_app()
