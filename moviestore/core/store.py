# moviestore/core/store.py
"""In-memory, ordered movie collection."""

import threading
import uuid
from typing import Any, Dict, Iterable, List, Optional

from moviestore.core.models.movie import Movie


class MovieNotFound(LookupError):
    def __init__(self, movie_id: str):
        super().__init__(f"Movie not found: {movie_id}")
        self.movie_id = movie_id


class MovieStore:
    """
    Holds validated movies in insertion order.

    Writers are serialized by a lock. Records are never mutated in place,
    so a list snapshot taken under the lock cannot observe a half-applied
    update.
    """

    def __init__(self, movies: Iterable[Movie] = ()):
        self._movies: List[Movie] = list(movies)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._movies)

    # ─── Reads ───────────────────────────────────────────────────────────────
    def list(self, genre: Optional[str] = None) -> List[Movie]:
        with self._lock:
            snapshot = list(self._movies)
        if not genre:
            return snapshot
        wanted = genre.lower()
        return [m for m in snapshot if any(g.lower() == wanted for g in m.genre)]

    def get(self, movie_id: str) -> Movie:
        with self._lock:
            return self._movies[self._index(movie_id)]

    # ─── Writes ──────────────────────────────────────────────────────────────
    def create(self, fields: Dict[str, Any]) -> Movie:
        """Store already-validated fields under a fresh id."""
        values = {k: v for k, v in fields.items() if k != "id"}
        with self._lock:
            taken = {m.id for m in self._movies}
            movie_id = str(uuid.uuid4())
            while movie_id in taken:
                movie_id = str(uuid.uuid4())
            movie = Movie.model_construct(id=movie_id, **values)
            self._movies.append(movie)
        return movie

    def update(self, movie_id: str, fields: Dict[str, Any]) -> Movie:
        """Merge already-validated partial fields over the stored record."""
        changes = {k: v for k, v in fields.items() if k != "id"}
        with self._lock:
            idx = self._index(movie_id)
            merged = self._movies[idx].model_copy(update=changes)
            self._movies[idx] = merged
        return merged

    def delete(self, movie_id: str) -> None:
        with self._lock:
            del self._movies[self._index(movie_id)]

    def _index(self, movie_id: str) -> int:
        # caller holds the lock
        for idx, movie in enumerate(self._movies):
            if movie.id == movie_id:
                return idx
        raise MovieNotFound(movie_id)
