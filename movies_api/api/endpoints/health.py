# /health endpoint

# movies_api/api/endpoints/health.py

import logging
from fastapi import APIRouter, status, Depends
from pydantic import BaseModel
from ..deps import get_movie_store
from movies_api.data_access.memory_store import MovieStore

logger = logging.getLogger(__name__)
router = APIRouter()

class HealthResponse(BaseModel):
    status: str = "ok"
    movies: int = 0

@router.get(
    "",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Perform a Health Check",
    response_description="Returns the health status of the API and the size of the collection.",
)
async def health_check(store: MovieStore = Depends(get_movie_store)):
    """
    Simple health check endpoint to confirm the API is running.
    Answers 503 while the movie store is not initialized.
    """
    return HealthResponse(status="ok", movies=len(store))
