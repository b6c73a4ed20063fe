"""
Draft War Room API - Main Application

FastAPI application for draft pick ownership and trade tracking.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from draft_war_room import __version__
from draft_war_room.api.dependencies import ClientManager
from draft_war_room.api.routes import leagues, picks, viz
from draft_war_room.config import get_settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    # Startup
    settings = get_settings()
    print(f"🏈 Starting Draft War Room API v{__version__}")
    print(f"   Sleeper API: {settings.sleeper_base_url}")
    print(
        f"   Draft defaults: {settings.default_season} season, "
        f"{settings.default_rounds} rounds"
    )
    if settings.debug:
        print("   Debug mode enabled")

    yield

    # Shutdown
    print("👋 Shutting down Draft War Room API")
    await ClientManager.close_client()


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
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    # Root endpoint
    @app.get("/", tags=["Root"])
    async def root():
        """List the pick ownership endpoints and the draft defaults in use."""
        return {
            "name": settings.api_title,
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
            "defaults": {
                "season": settings.default_season,
                "rounds": settings.default_rounds,
            },
            "endpoints": {
                "leagues": "/api/leagues/{league_id}",
                "teams": "/api/leagues/{league_id}/teams",
                "ownership": "/api/picks/{league_id}/ownership",
                "board": "/api/picks/{league_id}/board",
                "team_picks": "/api/picks/{league_id}/teams/{roster_id}",
                "chain": "/api/picks/{league_id}/chain/{round}/{slot}",
                "trades": "/api/picks/{league_id}/trades",
                "draft_board_chart": "/api/viz/{league_id}/draft-board",
                "pick_capital_chart": "/api/viz/{league_id}/pick-capital",
            },
        }

    # Register API routes
    app.include_router(leagues.router, prefix="/api/leagues", tags=["Leagues"])
    app.include_router(picks.router, prefix="/api/picks", tags=["Draft Picks"])
    app.include_router(viz.router, prefix="/api/viz", tags=["Visualization"])

    return app


# Create the application instance
app = create_app()


def run():
    """Run the application (used by the CLI entry point)."""
    settings = get_settings()
    uvicorn.run(
        "draft_war_room.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )


if __name__ == "__main__":
    run()
