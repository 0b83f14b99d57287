# Origin allow-list for cross-origin requests
# movies_api/core/cors.py

import logging
from typing import Dict, FrozenSet, Iterable, Optional

logger = logging.getLogger(__name__)

PREFLIGHT_METHODS = "GET, POST, PATCH, DELETE"


class OriginPolicy:
    """
    Decides whether a request's Origin may read the response.

    Only exact, case-sensitive matches against the allow-list are accepted.
    Requests without an Origin header (same-origin or non-browser clients)
    are allowed but get no Access-Control-Allow-Origin header, since there
    is nothing to echo back.
    """

    def __init__(self, accepted_origins: Iterable[str]):
        self.accepted_origins: FrozenSet[str] = frozenset(accepted_origins)

    def is_allowed(self, origin: Optional[str]) -> bool:
        return not origin or origin in self.accepted_origins

    def headers_for(self, origin: Optional[str]) -> Dict[str, str]:
        """Headers to attach to a simple (non-preflight) response."""
        if not self.is_allowed(origin):
            logger.warning(f"Rejected cross-origin request from {origin}")
            return {}
        if not origin:
            return {}
        return {"Access-Control-Allow-Origin": origin}

    def preflight_headers_for(self, origin: Optional[str]) -> Dict[str, str]:
        """Headers for an OPTIONS preflight; allowed origins also get the method list."""
        headers = self.headers_for(origin)
        if self.is_allowed(origin):
            headers["Access-Control-Allow-Methods"] = PREFLIGHT_METHODS
        return headers
