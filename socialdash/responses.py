"""
SocialDash API Error Responses
Maps domain errors to the standard JSON error envelope
"""
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse

from .errors import NotFoundError, SocialDashError, TransientFetchError, ValidationError
from .logging_config import api_logger


def error_body(message: str, error_code: str, details: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    return {
        "ok": False,
        "error": message,
        "error_code": error_code,
        "details": details or None,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


def status_for(exc: SocialDashError) -> int:
    if isinstance(exc, NotFoundError):
        return 404
    if isinstance(exc, ValidationError):
        return 422
    if isinstance(exc, TransientFetchError):
        return 503
    return 400


async def domain_exception_handler(request: Request, exc: SocialDashError) -> JSONResponse:
    """Exception handler for errors raised by the store and lifecycle rules"""
    status_code = status_for(exc)
    api_logger.warning(
        f"API Error: {exc.message}",
        status_code=status_code,
        error_code=exc.error_code,
        path=request.url.path,
    )

    headers = {"Retry-After": "1"} if isinstance(exc, TransientFetchError) else None
    return JSONResponse(
        status_code=status_code,
        content=error_body(exc.message, exc.error_code, exc.details),
        headers=headers,
    )
