"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shoplist.config import get_settings
from shoplist.logging_config import configure_logging, get_logger
from shoplist.routers import ingredients_router

settings = get_settings()

# Configure logging on module load
configure_logging(log_level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info(f"Starting Shoplist API (environment={settings.environment})")
    yield
    logger.info("Shutting down Shoplist API")


app = FastAPI(
    title="Shoplist API",
    description="Turn recipe ingredient lines into shopping-list items",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(ingredients_router)


@app.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "ok", "service": "shoplist-api"}


@app.get("/")
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "Shoplist API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
