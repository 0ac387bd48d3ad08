"""
SerialSmith - Error Handling
Unified error format and exception handlers

The normalizer core never raises for malformed input; these errors belong
to the service layer that wraps it.
"""

from typing import Any, Dict, Optional

from fastapi import HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class SerialSmithError(Exception):
    """Base exception for SerialSmith errors."""

    def __init__(
        self,
        code: str,
        message: str,
        detail: Optional[Dict[str, Any]] = None,
        status_code: int = 400,
    ):
        self.code = code
        self.message = message
        self.detail = detail or {}
        self.status_code = status_code
        super().__init__(message)

    def to_response(self) -> Dict[str, Any]:
        """Convert to standard error response format."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "detail": self.detail,
            }
        }


class ErrorCodes:
    INPUT_TOO_LARGE = "INPUT_TOO_LARGE"
    NO_DATA = "NO_DATA"
    VALIDATION_ERROR = "VALIDATION_ERROR"


class InputTooLargeError(SerialSmithError):
    def __init__(self, size: int, max_size: int):
        super().__init__(
            code=ErrorCodes.INPUT_TOO_LARGE,
            message=f"Input size ({size} chars) exceeds maximum ({max_size} chars)",
            detail={"size": size, "max_size": max_size},
            status_code=413,
        )


class NoDataError(SerialSmithError):
    def __init__(self, raw_length: int):
        super().__init__(
            code=ErrorCodes.NO_DATA,
            message="No data to paste",
            detail={"raw_length": raw_length},
            status_code=422,
        )


# Exception handlers for FastAPI
async def serialsmith_error_handler(
    request: Request, exc: SerialSmithError
) -> JSONResponse:
    """Handle SerialSmithError exceptions."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_response())


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTPException and convert to standard format."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": {
                "code": "HTTP_ERROR",
                "message": str(exc.detail),
                "detail": {},
            }
        },
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request body validation failures (e.g. an unknown policy value)."""
    return JSONResponse(
        status_code=422,
        content={
            "error": {
                "code": ErrorCodes.VALIDATION_ERROR,
                "message": "Request validation failed",
                "detail": {"errors": jsonable_encoder(exc.errors())},
            }
        },
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    return JSONResponse(
        status_code=500,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
                "detail": {"type": type(exc).__name__, "message": str(exc)},
            }
        },
    )
