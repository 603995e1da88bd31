from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

from fastapi import FastAPI, Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from messenger_relay.api.middleware.access_log import AccessLogMiddleware
from messenger_relay.api.v1.routers import health, messenger
from messenger_relay.config import Settings, settings as default_settings
from messenger_relay.infrastructure.auth.bcrypt_hasher import BcryptHasher
from messenger_relay.infrastructure.db.session import Database
from messenger_relay.services.action_router import ActionRouter

logger = logging.getLogger(__name__)


def _build_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Startup / shutdown lifecycle."""
        db = Database(settings.DATABASE_URL, echo=settings.DB_ECHO)
        await db.create_schema()
        app.state.db = db
        app.state.action_router = ActionRouter(
            hasher=BcryptHasher(rounds=settings.BCRYPT_ROUNDS),
            write_lock=asyncio.Lock(),
        )
        logger.info("Messenger API listening under %s", settings.API_PREFIX)

        yield

        await db.dispose()

    return lifespan


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    app = FastAPI(
        title="Messenger Relay",
        version="0.1.0",
        lifespan=_build_lifespan(settings),
    )

    if settings.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.CORS_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    app.add_middleware(AccessLogMiddleware)

    _register_exception_handlers(app, settings.API_PREFIX)

    app.include_router(health.router)
    app.include_router(messenger.build_router(settings.API_PREFIX))

    _mount_web_root(app, settings.WEB_ROOT)

    return app


def _register_exception_handlers(app: FastAPI, api_prefix: str) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def _method_not_allowed(req: Request, exc: StarletteHTTPException) -> Response:
        # Methods outside the route's list never reach the action router.
        if exc.status_code == 405 and req.url.path.startswith(api_prefix):
            return PlainTextResponse("Not implemented", status_code=501)
        return await http_exception_handler(req, exc)


def _mount_web_root(app: FastAPI, web_root: str | None) -> None:
    """Serve static files for every path outside the API prefix."""
    if not web_root:
        return
    directory = Path(web_root)
    if not directory.is_dir():
        logger.warning("WEB_ROOT %s is not a directory, static files disabled", directory)
        return
    app.mount("/", StaticFiles(directory=directory, html=True), name="web_root")
