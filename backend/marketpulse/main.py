"""
MarketPulse Backend - FastAPI Application

Main entry point for the backend API.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from marketpulse.core.config import settings
from marketpulse.api.v1 import router as api_v1_router
from marketpulse.services.data_ingestion import get_market_data_service
from marketpulse.services.indicators import get_indicator_service
from marketpulse.services.synthesizer import get_synthesizer_service

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    print(f"Starting {settings.app_name} v{settings.app_version}")
    print(f"Environment: {settings.environment}")
    print(f"Upstream data: {settings.enable_upstream}")

    yield

    # Shutdown
    print("Shutting down...")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    MarketPulse Indian Index Dashboard API

    ## Architecture
    - **Market Data**: Fetches index data from Yahoo Finance
    - **Synthesizer**: Seeded fallback bars, option chain and FII/DII flows
    - **Indicator Engine**: Calculates technical indicators (pure Python/NumPy)
    - **Strategy**: Option payoff curves and calculator

    ## Core Principles
    - Synthetic data is stable within a 5-minute block
    - Outside market hours everything is frozen at the close
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware
cors_origins = [settings.frontend_url]
if settings.allowed_origins:
    cors_origins.extend([o for o in settings.allowed_origins if o not in cors_origins])

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_v1_router, prefix="/api/v1")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    services = {
        "synthesizer": await get_synthesizer_service().health_check(),
        "indicators": await get_indicator_service().health_check(),
    }
    return {
        "status": "healthy" if all(services.values()) else "degraded",
        "app": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
        "services": services,
    }


@app.get("/health/upstream")
async def upstream_health():
    """Probe the upstream quote provider."""
    return {"upstream": await get_market_data_service().health_check()}


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "MarketPulse Backend API",
        "docs": "/docs",
        "health": "/health",
    }
