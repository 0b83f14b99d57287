# movies_api/services/movie_service.py

import logging
import uuid
from typing import Any, List, Optional

from movies_api.core.validation import ValidationFailed, validate_movie, validate_partial_movie
from movies_api.data_access.memory_store import MovieStore
from movies_api.models.movie import Movie, Violation
from movies_api.utils.helpers import normalize_text

logger = logging.getLogger(__name__)


class MovieNotFoundError(Exception):
    """Custom exception when a movie is not found."""
    pass


class MovieValidationError(Exception):
    """Raised when a movie draft fails validation. Carries the field-level violations."""

    def __init__(self, violations: List[Violation]):
        super().__init__(f"{len(violations)} validation error(s)")
        self.violations = violations


class MovieService:
    def __init__(self, store: MovieStore):
        """
        Initializes the Movie Service.

        Args:
            store: The MovieStore owning the movie collection.
        """
        self.store = store

    async def get_movies(self, genre: Optional[str] = None) -> List[Movie]:
        """
        Retrieves all movies, optionally filtered by genre.

        Args:
            genre: Optional genre, matched case-insensitively against each movie's genres.

        Returns:
            Matching movies in stored order. An unknown genre yields an empty list.
        """
        movies = self.store.all()
        wanted = normalize_text(genre)
        if not wanted:
            return movies

        filtered = [
            movie for movie in movies
            if any(normalize_text(g) == wanted for g in movie.genre)
        ]
        logger.info(f"Fetched {len(filtered)} of {len(movies)} movies for genre '{genre}'")
        return filtered

    async def get_movie_by_id(self, movie_id: str) -> Movie:
        """
        Retrieves a single movie by its id.

        Raises:
            MovieNotFoundError: If no movie has the given id.
        """
        movie = self.store.get(movie_id)
        if movie is None:
            logger.warning(f"Movie with ID {movie_id} not found.")
            raise MovieNotFoundError(f"Movie with ID '{movie_id}' not found.")
        logger.debug(f"Found movie with ID: {movie_id}")
        return movie

    async def create_movie(self, raw_body: Any) -> Movie:
        """
        Validates a full movie draft and appends it with a freshly generated id.

        Args:
            raw_body: Decoded JSON request body.

        Returns:
            The created Movie.

        Raises:
            MovieValidationError: If the draft is invalid.
        """
        result = validate_movie(raw_body)
        if isinstance(result, ValidationFailed):
            logger.warning(f"Rejected movie draft: {len(result.violations)} violation(s)")
            raise MovieValidationError(result.violations)

        movie = Movie(id=str(uuid.uuid4()), **result.data)
        self.store.append(movie)
        logger.info(f"Created movie {movie.id} ('{movie.title}')")
        return movie

    async def update_movie(self, movie_id: str, raw_body: Any) -> Movie:
        """
        Applies a partial movie draft to an existing movie.

        The body is validated before the lookup, so an invalid draft is reported
        even for an unknown id. Fields absent from the draft keep their values.

        Raises:
            MovieValidationError: If the draft is invalid.
            MovieNotFoundError: If no movie has the given id.
        """
        result = validate_partial_movie(raw_body)
        if isinstance(result, ValidationFailed):
            logger.warning(f"Rejected partial draft for movie {movie_id}: {len(result.violations)} violation(s)")
            raise MovieValidationError(result.violations)

        updated = self.store.update(movie_id, result.data)
        if updated is None:
            logger.warning(f"Cannot update movie {movie_id}: not found.")
            raise MovieNotFoundError(f"Movie with ID '{movie_id}' not found.")
        logger.info(f"Updated movie {movie_id} fields: {sorted(result.data)}")
        return updated

    async def delete_movie(self, movie_id: str) -> None:
        """
        Removes a movie from the collection.

        Raises:
            MovieNotFoundError: If no movie has the given id.
        """
        removed = self.store.remove(movie_id)
        if removed is None:
            logger.warning(f"Cannot delete movie {movie_id}: not found.")
            raise MovieNotFoundError(f"Movie with ID '{movie_id}' not found.")
        logger.info(f"Deleted movie {movie_id} ('{removed.title}')")
