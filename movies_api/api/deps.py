# FastAPI dependencies (store, services, request helpers)
# movies_api/api/deps.py

import json
import logging
from typing import Any, Optional

from fastapi import Depends, Header, HTTPException, Request, status

from movies_api.core.cors import OriginPolicy
from movies_api.data_access.memory_store import MovieStore
from movies_api.services.movie_service import MovieService

logger = logging.getLogger(__name__)


class MalformedBodyError(Exception):
    """Raised when a request body is not valid JSON."""
    pass


# --- Store Dependency ---

def get_movie_store(request: Request) -> MovieStore:
    """
    FastAPI dependency that returns the application's MovieStore.

    Raises:
        HTTPException 503: If the store has not been initialized (lifespan not run).
    """
    store = getattr(request.app.state, "movie_store", None)
    if store is None:
        logger.critical("Movie store is not available. Check application startup.")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Movie store not available.",
        )
    return store


def get_movie_service(store: MovieStore = Depends(get_movie_store)) -> MovieService:
    return MovieService(store=store)


# --- CORS Dependency ---

def get_origin_policy(request: Request) -> OriginPolicy:
    return request.app.state.origin_policy


def get_origin(origin: Optional[str] = Header(None)) -> Optional[str]:
    """The request's Origin header, if any."""
    return origin


# --- Body Dependency ---

def _is_json_content_type(content_type: Optional[str]) -> bool:
    if not content_type:
        return False
    media_type = content_type.split(";")[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


def _reject_constant(token: str) -> Any:
    raise ValueError(f"Invalid JSON token: {token}")


async def get_json_body(request: Request) -> Any:
    """
    Decodes the raw request body as JSON.

    Only `application/json` (or `+json`) bodies are decoded. An empty body or
    one sent with another content type decodes to an empty object so that it
    reaches validation like any other draft.

    Raises:
        MalformedBodyError: If the body is not valid JSON, including the
            non-standard NaN and Infinity tokens.
    """
    if not _is_json_content_type(request.headers.get("content-type")):
        return {}
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, UnicodeDecodeError) as e:
        logger.warning(f"Malformed JSON body on {request.method} {request.url.path}: {e}")
        raise MalformedBodyError(str(e))
