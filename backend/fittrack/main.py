"""
FitTrack Backend - FastAPI Application
"""
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fittrack.core.config import settings
from fittrack.core.exceptions import StorageUnavailableError
from fittrack.core.logging import setup_logging, get_logger
from fittrack.core.database import init_db
from fittrack.api import analytics, plans, profiles, records, reports

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    setup_logging()
    logger.info("Starting FitTrack Backend", version="1.0.0")
    await init_db()
    logger.info("Database initialized")
    
    yield
    
    # Shutdown
    logger.info("Shutting down FitTrack Backend")


app = FastAPI(
    title="FitTrack API",
    description="Workout and meal tracking with aggregate analytics",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(records.router, prefix="/api/users", tags=["records"])
app.include_router(analytics.router, prefix="/api/users", tags=["analytics"])
app.include_router(reports.router, prefix="/api/users", tags=["reports"])
app.include_router(profiles.router, prefix="/api/users", tags=["profiles"])
app.include_router(plans.router, prefix="/api/users", tags=["plans"])


@app.exception_handler(StorageUnavailableError)
async def storage_unavailable_handler(request: Request, exc: StorageUnavailableError):
    """Store read/write failures surface as 503."""
    logger.error(
        "Storage unavailable",
        path=request.url.path,
        operation=exc.operation,
        collection=exc.collection,
        error=str(exc),
    )
    return JSONResponse(status_code=503, content={"detail": "Storage unavailable"})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """422 without echoing rejected input (it may not be JSON-encodable, e.g. NaN)."""
    errors = [
        {key: value for key, value in error.items() if key != "input"}
        for error in exc.errors()
    ]
    return JSONResponse(status_code=422, content={"detail": jsonable_encoder(errors)})


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "fittrack-backend"}
