"""FastAPI application factory."""

from __future__ import annotations
import os
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roomdims.api.routes import router
from roomdims.services.dimension_service import DimensionService
from roomdims.services.fixtures import DEFAULT_FIXTURES_DIR, RoomFixtureLoader
from roomdims.services.session import SessionStore


def create_app(fixtures_dir: Path | str | None = None) -> FastAPI:
    app = FastAPI(
        title="Room Dimension Inference",
        description="Ranked length/width candidates from a room's wall graph",
        version="0.1.0",
    )

    # CORS: allow the Vite dev server
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if fixtures_dir is None:
        fixtures_dir = os.environ.get("ROOMDIMS_FIXTURES_DIR", DEFAULT_FIXTURES_DIR)

    service = DimensionService()
    app.state.service = service
    app.state.sessions = SessionStore(service)
    app.state.loader = RoomFixtureLoader(fixtures_dir)

    app.include_router(router, prefix="/api")

    return app


app = create_app()
