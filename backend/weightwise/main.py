from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging

from weightwise.config import settings
from weightwise.database import init_db
from weightwise.routers import users, entries, goals, analytics, motivation
from weightwise.utils.metrics import InvalidMeasurementError


# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    await init_db()
    logger.info(f"{settings.APP_NAME} started")
    yield


app = FastAPI(
    title=settings.APP_NAME,
    description="Personal weight tracker - log entries, set goals, follow your progress",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidMeasurementError)
async def invalid_measurement_handler(request: Request, exc: InvalidMeasurementError):
    logger.warning(f"Invalid measurement on {request.url.path}: {exc}")
    return JSONResponse(status_code=422, content={"detail": str(exc)})


# Include routers
user_prefix = f"{settings.API_V1_PREFIX}/users"
app.include_router(users.router, prefix=user_prefix, tags=["Users"])
app.include_router(entries.router, prefix=f"{user_prefix}/{{user_id}}/entries", tags=["Weight Entries"])
app.include_router(goals.router, prefix=f"{user_prefix}/{{user_id}}/goals", tags=["Goals"])
app.include_router(analytics.router, prefix=f"{user_prefix}/{{user_id}}/analytics", tags=["Analytics"])
app.include_router(motivation.router, prefix=f"{settings.API_V1_PREFIX}/motivation", tags=["Motivation"])


@app.get("/")
async def root():
    return {
        "app": settings.APP_NAME,
        "version": "1.0.0",
        "status": "healthy",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
