"""
Catch-all routes for requests no other endpoint accepts.

Must be included last: the ``/{path:path}`` pattern matches every path,
so it only sees requests that earlier routes did not fully match.
"""

from fastapi import APIRouter, Request

from moviehub.api.errors import ApiError, ErrorKind

router = APIRouter(include_in_schema=False)

FALLBACK_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/{path:path}", methods=FALLBACK_METHODS)
def unmatched(request: Request):
    """Reject a request that no endpoint handles."""
    method = request.method
    if method == "GET":
        raise ApiError(ErrorKind.UNKNOWN_ENDPOINT)
    if method == "DELETE" and request.url.path.startswith("/movies/"):
        raise ApiError(ErrorKind.MALFORMED_INPUT, "movie id must be a non-negative integer")
    raise ApiError(ErrorKind.METHOD_NOT_ALLOWED)
