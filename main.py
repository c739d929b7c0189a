from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from core.logging_config import setup_logging

# Feature routes
from features.forecast.routes.forecast_routes import router as forecast_router
from features.buoys.routes.buoy_routes import router as buoy_router
from features.waves.routes.wave_routes import router as wave_router

# Services and clients
from features.buoys.services.ndbc_buoy_client import NDBCBuoyClient
from features.buoys.services.buoy_service import BuoyService

setup_logging()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info("🚀 Starting Surf Forecast API...")
    buoy_client = NDBCBuoyClient()
    app.state.buoy_service = BuoyService(buoy_client=buoy_client)

    logger.info("✨ API startup complete - ready to serve requests")
    try:
        yield
    finally:
        logger.info("🔄 Shutting down API...")
        await buoy_client.close()
        logger.info("👋 API shutdown complete")

app = FastAPI(
    title="Surf Forecast API",
    description="Surf forecasts from wave and wind model data, and reconciled NDBC buoy observations",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include feature routers
app.include_router(forecast_router)
app.include_router(buoy_router)
app.include_router(wave_router)

@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "time": datetime.now(timezone.utc).isoformat()
    }

if __name__ == "__main__":
    import uvicorn

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", 5010))

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=True,
        log_level="info",
        workers=1
    )
