from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from auth import router as auth_router
from auth.security import TokenService
from core.app_logging import configure_logging
from core.config import Settings, load_settings
from core.db import Database, get_db
from core.errors import register_exception_handlers
from core.gate import GatePolicy, allow_all, install_request_gate
from gallery import router as gallery_router
from notifications import router as notifications_router
from realtime import router as realtime_router
from realtime.notifier import RealtimeNotifier, build_notifier
from slider import router as slider_router

logger = logging.getLogger(__name__)


def build_token_service(settings: Settings) -> TokenService:
    return TokenService(
        secret=settings.jwt_secret,
        refresh_secret=settings.effective_refresh_secret,
        algorithm=settings.jwt_algorithm,
        access_ttl_seconds=settings.access_token_expire_minutes * 60,
        refresh_ttl_seconds=settings.refresh_token_expire_days * 24 * 60 * 60,
    )


def create_app(
    settings: Settings | None = None,
    *,
    database: Database | None = None,
    notifier: RealtimeNotifier | None = None,
    gate_policy: GatePolicy = allow_all,
) -> FastAPI:
    """
    Build the API with its process-wide handles.

    Settings are validated first; a missing DATABASE_URL or JWT_SECRET raises
    ConfigurationError here, before anything is served.
    """
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    db = database or Database(settings.database_url)
    realtime = notifier or build_notifier(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Open the DB pool once per process.
        await app.state.db.connect()
        try:
            yield
        finally:
            await app.state.db.close()

    app = FastAPI(lifespan=lifespan)
    app.state.settings = settings
    app.state.db = db
    app.state.notifier = realtime
    app.state.tokens = build_token_service(settings)

    # Browsers call the API with credentials (session cookies).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_request_gate(app, gate_policy)
    register_exception_handlers(app)

    app.include_router(auth_router.router, tags=["auth"])
    app.include_router(gallery_router.router, tags=["gallery"])
    app.include_router(slider_router.router, tags=["slider"])
    app.include_router(notifications_router.router, tags=["notifications"])
    app.include_router(realtime_router.router, tags=["realtime"])

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/api/health/db")
    async def health_db(db: Database = Depends(get_db)) -> JSONResponse:
        start = time.perf_counter()
        try:
            await db.fetch_value("SELECT 1")
        except Exception:
            logger.exception("Health check failed")
            return JSONResponse(
                {"status": "error", "database": "disconnected"},
                status_code=500,
            )
        duration_ms = round((time.perf_counter() - start) * 1000)
        return JSONResponse(
            {
                "status": "ok",
                "database": "connected",
                "latency": f"{duration_ms}ms",
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        )

    return app
