"""
JSON response helper.

All responses leaving the service carry the same permissive
cross‑origin headers.  Successful responses get them from the
middleware installed in ``main``; error responses are built here.
"""

from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse

CORS_HEADERS: Dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type,Authorization",
    "Access-Control-Allow-Methods": "GET,POST,DELETE,OPTIONS",
}


def json_response(status_code: int, body: Optional[Dict[str, Any]] = None) -> JSONResponse:
    """Build a JSON response with the CORS headers attached."""
    return JSONResponse(status_code=status_code, content=body or {}, headers=dict(CORS_HEADERS))
