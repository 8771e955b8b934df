"""
FastAPI application entry point for the Toss the Remote API.

Run: uvicorn tossremote.api.main:app --host 0.0.0.0 --port 8000
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tossremote.api.config import get_api_host, get_api_port, get_log_file, get_log_level
from tossremote.api.routers import recommendations, movies, trending, system
from tossremote.core.exceptions import TossRemoteError
from tossremote.utils.logging_config import configure_api_logging

configure_api_logging(level=get_log_level(), log_file=get_log_file())
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Toss the Remote API",
    description="AI movie recommendations enriched with TMDB metadata",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(recommendations.router)
app.include_router(movies.router)
app.include_router(trending.router)
app.include_router(system.router)


@app.exception_handler(TossRemoteError)
def handle_service_error(request: Request, exc: TossRemoteError):
    """Render domain errors as {"error": message} with their status."""
    logger.warning("%s %s failed (%s): %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(StarletteHTTPException)
def handle_http_error(request: Request, exc: StarletteHTTPException):
    """Use the same error body shape as domain errors."""
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.exception_handler(RequestValidationError)
def handle_validation_error(request: Request, exc: RequestValidationError):
    """Malformed request bodies are client errors (400)."""
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return JSONResponse(status_code=400, content={"error": f"Invalid request: {message}"})


@app.exception_handler(Exception)
def handle_unexpected_error(request: Request, exc: Exception):
    """Anything not handled above is a 500 with a JSON body."""
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


@app.get("/")
def root():
    """Root endpoint."""
    return {
        "message": "Toss the Remote API",
        "docs": "/docs",
        "health": "/api/health",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=get_api_host(), port=get_api_port())
