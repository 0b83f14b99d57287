# movies_api/api/endpoints/movies.py

import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from fastapi.responses import JSONResponse

from movies_api.api.deps import get_json_body, get_movie_service, get_origin, get_origin_policy
from movies_api.core.cors import OriginPolicy
from movies_api.models.movie import ErrorResponse, MessageResponse, Movie, Violation
from movies_api.services.movie_service import MovieNotFoundError, MovieService, MovieValidationError

logger = logging.getLogger(__name__)
router = APIRouter()

NOT_FOUND_MESSAGE = "Movie not found"


def _not_found(headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"message": NOT_FOUND_MESSAGE},
        headers=headers,
    )


def _invalid(status_code: int, violations: List[Violation]) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": [v.model_dump() for v in violations]},
    )


@router.get(
    "",  # GET /movies
    response_model=List[Movie],
    summary="List Movies",
    description="Retrieve all movies, optionally filtered by genre (case-insensitive).",
)
async def list_movies(
    response: Response,
    genre: Optional[str] = Query(None, description="Filter movies by genre."),
    origin: Optional[str] = Depends(get_origin),
    origin_policy: OriginPolicy = Depends(get_origin_policy),
    movie_service: MovieService = Depends(get_movie_service),
):
    response.headers.update(origin_policy.headers_for(origin))
    try:
        return await movie_service.get_movies(genre=genre)
    except Exception as e:
        logger.error(f"Error listing movies: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while retrieving movies."
        )


@router.get(
    "/{movie_id}",  # GET /movies/{movie_id}
    response_model=Movie,
    summary="Get Movie",
    responses={404: {"model": MessageResponse, "description": "Movie not found"}},
)
async def get_movie(
    movie_id: str,
    movie_service: MovieService = Depends(get_movie_service),
):
    """Fetches a single movie by its id."""
    try:
        return await movie_service.get_movie_by_id(movie_id)
    except MovieNotFoundError:
        return _not_found()
    except Exception as e:
        logger.error(f"Error getting movie {movie_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while retrieving the movie."
        )


@router.post(
    "",  # POST /movies
    response_model=Movie,
    status_code=status.HTTP_201_CREATED,
    summary="Create Movie",
    responses={422: {"model": ErrorResponse, "description": "Validation Error"}},
)
async def create_movie(
    body: Any = Depends(get_json_body),
    movie_service: MovieService = Depends(get_movie_service),
):
    """
    Creates a movie from a full draft. The id is generated by the server;
    `rate` defaults to 0.
    """
    try:
        return await movie_service.create_movie(body)
    except MovieValidationError as e:
        return _invalid(status.HTTP_422_UNPROCESSABLE_ENTITY, e.violations)
    except Exception as e:
        logger.error(f"Error creating movie: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while creating the movie."
        )


@router.patch(
    "/{movie_id}",  # PATCH /movies/{movie_id}
    response_model=Movie,
    summary="Update Movie",
    responses={
        400: {"model": ErrorResponse, "description": "Validation Error"},
        404: {"model": MessageResponse, "description": "Movie not found"},
    },
)
async def update_movie(
    movie_id: str,
    body: Any = Depends(get_json_body),
    movie_service: MovieService = Depends(get_movie_service),
):
    """
    Applies a partial draft to a movie. Only the fields present in the body
    change; an `id` in the body is ignored.
    """
    try:
        return await movie_service.update_movie(movie_id, body)
    except MovieValidationError as e:
        return _invalid(status.HTTP_400_BAD_REQUEST, e.violations)
    except MovieNotFoundError:
        return _not_found()
    except Exception as e:
        logger.error(f"Error updating movie {movie_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while updating the movie."
        )


@router.delete(
    "/{movie_id}",  # DELETE /movies/{movie_id}
    response_model=MessageResponse,
    summary="Delete Movie",
    responses={404: {"model": MessageResponse, "description": "Movie not found"}},
)
async def delete_movie(
    movie_id: str,
    response: Response,
    origin: Optional[str] = Depends(get_origin),
    origin_policy: OriginPolicy = Depends(get_origin_policy),
    movie_service: MovieService = Depends(get_movie_service),
):
    cors_headers = origin_policy.headers_for(origin)
    try:
        await movie_service.delete_movie(movie_id)
    except MovieNotFoundError:
        return _not_found(headers=cors_headers)
    except Exception as e:
        logger.error(f"Error deleting movie {movie_id}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while deleting the movie."
        )
    response.headers.update(cors_headers)
    return MessageResponse(message="Movie deleted")


@router.options(
    "/{movie_id}",  # OPTIONS /movies/{movie_id}
    summary="CORS Preflight",
    response_class=Response,
)
async def preflight_movie(
    movie_id: str,
    origin: Optional[str] = Depends(get_origin),
    origin_policy: OriginPolicy = Depends(get_origin_policy),
):
    """Answers a browser preflight with an empty 200 response."""
    return Response(
        status_code=status.HTTP_200_OK,
        headers=origin_policy.preflight_headers_for(origin),
    )
