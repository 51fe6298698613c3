"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from interiorsight import __version__
from interiorsight.config import settings
from interiorsight.engine.stages import register_stages

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.interiorsight_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="InteriorSight",
        description="Interior room photo verification — gated filter chain and batch ranking",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all stage modules to trigger registration
    register_stages()

    from interiorsight.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
