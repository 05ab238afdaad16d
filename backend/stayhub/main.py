"""StayHub - FastAPI Application Entry Point."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stayhub.core.config import Settings, get_settings
from stayhub.core.env_validation import validate_environment
from stayhub.core.state import build_state
from stayhub.routers import (
    auth_router,
    properties_router,
    bookings_router,
    dashboard_router,
)

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build an application with its own, freshly seeded stores."""
    settings = validate_environment(settings or get_settings())

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        logger.info(
            f"{settings.app_name} started with {len(app.state.stayhub.catalog)} listings"
        )
        yield

    app = FastAPI(
        title=settings.app_name,
        description="Short-term rental storefront: listings, search, booking and dashboards.",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.settings = settings
    app.state.stayhub = build_state(settings)

    logger.info(f"CORS configured with origins: {settings.origins}")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # API v1 routers
    app.include_router(auth_router, prefix=settings.api_v1_prefix)
    app.include_router(properties_router, prefix=settings.api_v1_prefix)
    app.include_router(bookings_router, prefix=settings.api_v1_prefix)
    app.include_router(dashboard_router, prefix=settings.api_v1_prefix)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "service": settings.app_name}

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "service": settings.app_name,
            "version": "1.0.0",
            "docs": "/docs" if settings.debug else "Disabled in production",
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("stayhub.main:app", host="0.0.0.0", port=8000)
