import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request

from shortlink_app.config import Settings, settings as default_settings
from shortlink_app.database.connection import Database
from shortlink_app.counter.factory import ClickCounterFactory, CounterBackend
from shortlink_app.services.click_tracker import ClickTracker
from shortlink_app.api.errors import register_error_handlers
from shortlink_app.api.v1 import links, metrics, redirect

# Import models to ensure they're registered with Base
from shortlink_app.models import ShortLink  # noqa: F401

logger = logging.getLogger("shortlink_app")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build a FastAPI app with its own database, counter store and click tracker.
    
    Resources are created in the lifespan (once per process) and released
    on shutdown; routes reach them through shortlink_app.dependencies.
    """
    settings = settings or default_settings

    if not logging.getLogger().handlers:
        logging.basicConfig(level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database = Database(settings.database_url)
        database.create_all()

        counter = await ClickCounterFactory.create(CounterBackend(settings.counter_backend), settings)
        tracker = ClickTracker(counter)

        app.state.database = database
        app.state.counter = counter
        app.state.click_tracker = tracker
        logger.info("Counter backend: %s", type(counter).__name__)

        try:
            yield
        finally:
            # Let in-flight clicks land before the store goes away
            await tracker.drain()
            await counter.close()
            database.dispose()
            logger.info("Shut down cleanly")

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Short link redirects with a click-count leaderboard",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    register_error_handlers(app)

    @app.get("/")
    def read_root():
        """Root endpoint with API information"""
        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.app_version,
            "docs": "/docs",
            "redoc": "/redoc"
        }

    @app.get("/api/v1/health")
    def health_check(request: Request):
        """Health check endpoint"""
        return {
            "status": "healthy",
            "environment": settings.environment,
            "counter_backend": type(request.app.state.counter).__name__,
            "pending_clicks": request.app.state.click_tracker.pending,
        }

    ######## Include routers
    app.include_router(links.router, prefix="/api/v1")
    app.include_router(metrics.router, prefix="/api/v1")
    # Catch-all /{code} goes last
    app.include_router(redirect.router)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=default_settings.host, port=default_settings.port)
