"""
Cartola Analytics API - Main Application

FastAPI application for Cartola FC team analytics.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cartola_analytics import __version__
from cartola_analytics.api.dependencies import ClientManager, StoreManager
from cartola_analytics.api.routes import dashboard, drilldown, teams, viz
from cartola_analytics.config import get_settings
from cartola_analytics.errors import DataSourceError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()
    scout_table = "custom" if settings.scout_weights else settings.scout_table
    print(f"⚽ Cartola Analytics v{__version__} (clubs: {settings.club_source}, scouts: {scout_table})")

    # Warm the snapshot so a bad data file shows up before the first request
    try:
        rows = StoreManager.get_store(settings).counts()
        print(f"   Snapshot {settings.data_file or '(empty)'}: {rows['teams']} teams, {rows['picks']} picks")
    except DataSourceError as e:
        print(f"   ⚠️  {e.message}")

    yield

    await ClientManager.close_client()
    StoreManager.reset()
    print("👋 Cartola Analytics stopped")


def create_app() -> FastAPI:
    """Application factory to create the FastAPI app."""
    settings = get_settings()

    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health check endpoint
    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint; reports whether the snapshot loads."""
        try:
            store = StoreManager.get_store(get_settings())
        except DataSourceError as e:
            return {"status": "degraded", "version": __version__, "error": e.message}
        return {"status": "healthy", "version": __version__, "rows": store.counts()}

    # Root endpoint
    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API info."""
        return {
            "name": settings.api_title,
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
            "endpoints": {
                "dashboard": "/api/dashboard",
                "drilldown": "/api/drilldown",
                "teams": "/api/teams",
                "viz": "/api/viz",
            },
        }

    # Register API routes
    app.include_router(dashboard.router, prefix="/api/dashboard", tags=["Dashboard"])
    app.include_router(drilldown.router, prefix="/api/drilldown", tags=["Drill-down"])
    app.include_router(teams.router, prefix="/api/teams", tags=["Teams"])
    app.include_router(viz.router, prefix="/api/viz", tags=["Visualization"])

    return app


# Create the application instance
app = create_app()


def run():
    """Run the application (used by the CLI entry point)."""
    settings = get_settings()
    uvicorn.run(
        "cartola_analytics.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )


if __name__ == "__main__":
    run()
