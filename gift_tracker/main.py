"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gift_tracker.api import auth, budgets, gifts, occasions, people, profile
from gift_tracker.api.exception_handlers import register_exception_handlers
from gift_tracker.config import Settings, get_settings
from gift_tracker.context import AppContext
from gift_tracker.database import init_db

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application and the server context it carries."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    context = AppContext.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Handle application startup and shutdown events."""
        init_db(context.engine)
        logger.info(f"Gift Tracker API started ({settings.environment})")
        yield
        context.engine.dispose()

    app = FastAPI(
        title="Gift Tracker API",
        description="Track people, gifts, occasions and budgets",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.context = context

    # CORS middleware for development
    if settings.is_development:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_exception_handlers(app)

    # Register routers
    app.include_router(auth.router)
    app.include_router(profile.router)
    app.include_router(people.router)
    app.include_router(gifts.router)
    app.include_router(occasions.router)
    app.include_router(budgets.router)

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "environment": settings.environment}

    return app
