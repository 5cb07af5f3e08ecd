import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from account_server import __version__
from account_server.api import create_api_router
from account_server.core.config import Settings, get_settings
from account_server.infrastructure.database.session import dispose_engine, init_db
from account_server.interfaces.http.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    yield
    await dispose_engine()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    app = FastAPI(
        title=settings.project_name,
        description="Account balance use / cancel transaction service",
        version=__version__,
        lifespan=lifespan,
    )

    register_exception_handlers(app)
    app.include_router(create_api_router(settings.api_prefix))

    @app.get("/health", summary="Liveness probe")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "account_server.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
    )


if __name__ == "__main__":
    run()
