"""
Migration Planner Estimation Service
Main entry point for the API server.
"""

import argparse
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from migration_planner import __version__
from migration_planner.api import router
from migration_planner.middleware import REQUEST_ID_HEADER, RequestIDMiddleware
from migration_planner.utils.config import config
from migration_planner.utils.logger import logger


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=config.app.name,
        description="Time estimates for VM migration stages",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )
    # Outermost, so every response carries the header
    app.add_middleware(RequestIDMiddleware)

    app.include_router(router)

    @app.on_event("startup")
    async def startup_event():
        logger.info(f"{config.app.name} v{__version__} starting up")

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info(f"{config.app.name} shutting down")

    return app


def run_api(host: str = "0.0.0.0", port: int = 8000, reload: bool = False):
    """Run the FastAPI server."""
    logger.info(f"Starting API server on {host}:{port}")
    uvicorn.run(
        "main:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
        log_level=config.app.log_level.lower()
    )


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Migration Planner Estimation Service")
    parser.add_argument("--host", default=config.api.host, help="Host to bind to")
    parser.add_argument("--port", type=int, default=config.api.port, help="API server port")
    parser.add_argument("--reload", action="store_true", help="Enable hot reload (dev mode)")

    args = parser.parse_args()
    run_api(args.host, args.port, args.reload)
