"""
FastAPI application entry point for the breeders backend.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from breeders.config import get_settings
from breeders.errors import PetError
from breeders.routes import router

logger = logging.getLogger(__name__)


async def pet_error_handler(request: Request, exc: PetError) -> JSONResponse:
    logger.info("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=400, content=exc.to_dict())


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    app = FastAPI(title="Breeders Backend (FastAPI)", version="0.1.0")
    app.add_exception_handler(PetError, pet_error_handler)
    app.include_router(router, prefix=settings.api_prefix)
    return app


app = create_app()
