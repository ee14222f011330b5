# authgate/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from authgate.api.api import api_router
from authgate.core.config import settings
from authgate.core.errors import AuthError
from authgate.core.logging_config import configure_logging
from authgate.db.init_db import init_db
from authgate.db.session import check_connection

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if check_connection() and settings.auto_create_tables:
        init_db()
    logger.info("server is up and running")
    yield


async def auth_error_handler(request: Request, exc: AuthError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def create_application() -> FastAPI:
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # ---------- STATIC FILES ----------
    app.mount("/static", StaticFiles(directory=str(settings.static_dir)), name="static")

    # ---------- ERRORS ----------
    app.add_exception_handler(AuthError, auth_error_handler)

    # ---------- ROUTERS ----------
    app.include_router(api_router)

    return app


app = create_application()
