"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from collage import __version__
from collage.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.collage_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Collage",
        description="Justified image-grid layout engine and collage renderer",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from collage.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
