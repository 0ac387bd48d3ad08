"""
SerialSmith - FastAPI Application
Main application entry point
"""

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from .api import cleanse
from .core.config import settings
from .core.errors import (
    SerialSmithError,
    generic_exception_handler,
    http_exception_handler,
    serialsmith_error_handler,
    validation_exception_handler,
)
from .core.models import HealthResponse

# Create FastAPI app
app = FastAPI(
    title="SerialSmith",
    description="Inventory serial number and asset tag normalization API",
    version="1.0.0",
)

# Configure CORS (spreadsheet add-in task pane)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.SERIALSMITH_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register exception handlers
app.add_exception_handler(SerialSmithError, serialsmith_error_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)

# Register routers
app.include_router(cleanse.router)


@app.get("/healthz", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="ok", env=settings.SERIALSMITH_ENV)


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "SerialSmith",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/healthz",
    }
