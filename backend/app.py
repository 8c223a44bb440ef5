from __future__ import annotations

# Standard library
import os
import logging as _logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

# Third-party
from dotenv import load_dotenv
from fastapi import FastAPI

# Local application imports
from api import users
from api.body_guard import MalformedBodyGuard
from domain.user.core.ports.user_repository import IUserRepository
from infrastructure.config import get_log_level, get_port
from infrastructure.user.repository_factory import (
    get_user_repository,
    reset_user_repository,
)

load_dotenv()

# --- Basic logging configuration (minimal) ---
_LOG_LEVEL = get_log_level()
try:
    _logging.basicConfig(
        level=getattr(_logging, _LOG_LEVEL, _logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
except Exception:  # pragma: no cover
    _logging.basicConfig(level=_logging.INFO)

for _ln in ("startup", "api.users"):
    _lg = _logging.getLogger(_ln)
    if _lg.level == 0:  # not set explicitly
        _lg.setLevel(getattr(_logging, _LOG_LEVEL, _logging.INFO))

# Versione letta da env (Docker build ARG -> ENV APP_VERSION)
APP_VERSION = os.getenv("APP_VERSION", "0.0.0-dev")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifecycle manager.

    STARTUP: when no repository was injected via ``create_app``, build the
    configured one (USER_REPOSITORY) and attach it to ``app.state``.
    SHUTDOWN: close the repository this lifespan created. Injected
    repositories belong to the caller and are left open.
    """
    logger = _logging.getLogger("startup")

    owned = getattr(app.state, "user_repository", None) is None
    if owned:
        app.state.user_repository = get_user_repository()

    logger.info(
        "lifespan.startup",
        extra={
            "repository": type(app.state.user_repository).__name__,
            "owned": owned,
        },
    )

    try:
        yield
    finally:
        if owned:
            await app.state.user_repository.close()
            app.state.user_repository = None
            reset_user_repository()
        logger.info("lifespan.shutdown", extra={"status": "cleanup"})


def create_app(repository: Optional[IUserRepository] = None) -> FastAPI:
    """Build the users API.

    Args:
        repository: Store client to serve requests with. When None the
            lifespan creates one from configuration at startup.
    """
    application = FastAPI(
        title="Users API",
        version=APP_VERSION,
        lifespan=lifespan,
    )
    application.state.user_repository = repository

    # Runs before routing: undecodable bodies never reach a handler
    application.add_middleware(MalformedBodyGuard)
    application.include_router(users.router)

    return application


app = create_app()


def main() -> Any:
    import uvicorn

    port = get_port()
    _logging.getLogger("startup").info("server.start", extra={"port": port})
    uvicorn.run(app, host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
