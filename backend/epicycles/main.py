"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from epicycles import __version__
from epicycles.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.epicycles_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Epicycles",
        description="Fourier epicycle engine — FFT of closed 2-D paths and truncated reconstruction",
        version=__version__,
        debug=settings.epicycles_env == "development",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from epicycles.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
