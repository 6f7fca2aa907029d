"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Annotated

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse

from complaints.api import auth, complaints, reports
from complaints.config import Settings, get_settings
from complaints.database import init_db
from complaints.services.errors import ComplaintsError, StorageError

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    init_db()
    logger.info(f"Complaint API started ({settings.environment})")
    yield


app = FastAPI(
    title="Complaint Desk API",
    description="Complaint submission, tracking and administration",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for development; in production the client is served from this origin
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(ComplaintsError)
async def complaints_error_handler(request: Request, exc: ComplaintsError):
    """Render domain errors as ``{"message": ...}``."""
    if isinstance(exc, StorageError):
        logger.error(f"Storage failure on {request.method} {request.url.path}")
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Render request validation failures as ``{"message": ...}`` with the first problem."""
    errors = exc.errors()
    message = errors[0]["msg"].removeprefix("Value error, ") if errors else "Invalid request"
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content={"message": message})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    """Log anything unhandled and hide the details from the client."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Server error"},
    )


# Register routers
app.include_router(auth.router)
app.include_router(complaints.router)
app.include_router(reports.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}


@app.get("/{full_path:path}", include_in_schema=False)
async def serve_frontend(full_path: str, settings: Annotated[Settings, Depends(get_settings)]):
    """Serve the single-page client: a static asset if one matches, else the shell."""
    frontend_dir = Path(settings.frontend_dir).resolve()
    if full_path:
        asset = (frontend_dir / full_path).resolve()
        if asset.is_file() and asset.is_relative_to(frontend_dir):
            return FileResponse(asset)

    index = frontend_dir / "index.html"
    if not index.is_file():
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": "Not found"})
    return FileResponse(index)
