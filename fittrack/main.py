"""
FitTrack API

FastAPI application for live workout recording and workout history.
"""

from contextlib import asynccontextmanager
import logging
import sys
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fittrack.config import settings
from fittrack.api.v1.router import api_router
from fittrack.features.history import HistoryStore, create_history_store
from fittrack.features.workout import WorkoutService


# === Logging Setup ===
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(sys.stdout),
    ]
)
logger = logging.getLogger(__name__)


def create_app(
    history_store: Optional[HistoryStore] = None,
    tick_interval: Optional[float] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        history_store: Store to use instead of the configured backend
        tick_interval: Clock tick interval override (0 disables the ticker)
    """

    # === Lifespan ===
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown events."""
        logger.info("Starting FitTrack API...")
        store = history_store
        if store is None:
            store = create_history_store(
                settings.history_backend,
                history_path=settings.history_path,
                database_url=settings.database_url,
            )
        logger.info(f"History store: {type(store).__name__}")

        app.state.history_store = store
        app.state.workout_service = WorkoutService(
            store,
            weight_kg=settings.weight_kg,
            tick_interval=(
                settings.tick_interval_seconds if tick_interval is None else tick_interval
            ),
            max_points=settings.max_record_points,
        )

        yield

        app.state.workout_service.shutdown()
        logger.info("Shutting down...")

    # === App Creation ===
    app = FastAPI(
        title="FitTrack API",
        description="Live GPS workout recording with pace, speed and calorie metrics",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # === Middleware ===
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # === Routes ===
    app.include_router(api_router, prefix="/api/v1")

    # === Health Check ===
    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": "0.1.0"}

    return app


app = create_app()
