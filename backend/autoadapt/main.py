"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from autoadapt import __version__
from autoadapt.config import settings
from autoadapt.engine.registry import load_adapters
from autoadapt.errors import AutoAdaptError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.autoadapt_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def _auto_adapt_error_handler(request: Request, exc: AutoAdaptError) -> JSONResponse:
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def create_app() -> FastAPI:
    app = FastAPI(
        title="AutoAdapt",
        description="Layout adaptation engine for canvas elements across sizes",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AutoAdaptError, _auto_adapt_error_handler)

    # Import all kind adapters to trigger registration
    registry = load_adapters()
    logger.debug("%d adapters registered", registry.count)

    from autoadapt.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
