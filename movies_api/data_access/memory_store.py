# In-memory movie collection and seed loading
# movies_api/data_access/memory_store.py

import json
import logging
import threading
from pathlib import Path
from typing import Iterable, List, Optional, Union

from pydantic import ValidationError

from movies_api.models.movie import Movie

logger = logging.getLogger(__name__)

DEFAULT_SEED_PATH = Path(__file__).resolve().parent.parent / "data" / "movies.json"


class SeedDataError(Exception):
    """Raised when the seed dataset cannot be read or contains invalid movies."""
    pass


class DuplicateMovieIdError(Exception):
    """Raised when a movie with an already stored id is appended."""
    pass


def load_seed_movies(path: Optional[Union[str, Path]] = None) -> List[Movie]:
    """
    Reads and validates the seed dataset.

    Args:
        path: JSON file holding an array of movies. Defaults to the bundled dataset.

    Returns:
        The validated movies, in file order.

    Raises:
        SeedDataError: If the file is missing, is not valid JSON, or a record is invalid.
    """
    seed_path = Path(path) if path else DEFAULT_SEED_PATH
    try:
        raw = json.loads(seed_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Could not read seed data from {seed_path}: {e}", exc_info=True)
        raise SeedDataError(f"Could not read seed data from {seed_path}: {e}")

    if not isinstance(raw, list):
        raise SeedDataError(f"Seed data in {seed_path} must be a JSON array of movies.")

    try:
        movies = [Movie.model_validate(item) for item in raw]
    except ValidationError as e:
        logger.error(f"Invalid movie in seed data {seed_path}: {e}")
        raise SeedDataError(f"Invalid movie in seed data {seed_path}: {e}")

    logger.info(f"Loaded {len(movies)} seed movies from {seed_path}")
    return movies


class MovieStore:
    """
    Owns the ordered, in-memory movie collection.

    Insertion order is preserved and ids are unique. All access goes through
    a single lock so mutations are serialized and readers never observe a
    half-applied change. Nothing is persisted.
    """

    def __init__(self, movies: Optional[Iterable[Movie]] = None):
        self._movies: List[Movie] = []
        self._lock = threading.Lock()
        for movie in movies or []:
            self.append(movie)

    def __len__(self) -> int:
        with self._lock:
            return len(self._movies)

    def all(self) -> List[Movie]:
        """Returns a snapshot of the collection in stored order."""
        with self._lock:
            return list(self._movies)

    def _find_index(self, movie_id: str) -> int:
        for index, movie in enumerate(self._movies):
            if movie.id == movie_id:
                return index
        return -1

    def get(self, movie_id: str) -> Optional[Movie]:
        with self._lock:
            index = self._find_index(movie_id)
            return self._movies[index] if index != -1 else None

    def append(self, movie: Movie) -> Movie:
        with self._lock:
            if self._find_index(movie.id) != -1:
                raise DuplicateMovieIdError(f"Movie with ID '{movie.id}' already exists.")
            self._movies.append(movie)
            return movie

    def update(self, movie_id: str, changes: dict) -> Optional[Movie]:
        """
        Shallow-merges `changes` over the stored movie and replaces it in place.

        Returns the merged movie, or None if no movie has the given id.
        """
        with self._lock:
            index = self._find_index(movie_id)
            if index == -1:
                return None
            changes = {k: v for k, v in changes.items() if k != "id"}
            updated = self._movies[index].model_copy(update=changes)
            self._movies[index] = updated
            return updated

    def remove(self, movie_id: str) -> Optional[Movie]:
        """Removes and returns the movie with the given id, or None if absent."""
        with self._lock:
            index = self._find_index(movie_id)
            if index == -1:
                return None
            return self._movies.pop(index)
