import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError

from core import db, errors, settings
from core.db import Database, get_db
from core.log import configure_logging, log_route
from questoes import router as questoes_router
from usuarios import router as usuarios_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per process, shared by reference through `get_db`.
    pool = await db.create_pool()
    app.state.db = Database(pool)
    logger.info("startup port=%s db_configured=%s", settings.app_port(), app.state.db.configured)
    try:
        yield
    finally:
        await db.close_pool(pool)


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="Achados e Perdidos API", lifespan=lifespan)

    app.add_exception_handler(errors.ApiError, errors.api_error_handler)
    app.add_exception_handler(RequestValidationError, errors.request_validation_handler)

    app.include_router(usuarios_router.router, tags=["usuarios"])
    app.include_router(questoes_router.router, tags=["questoes"])

    @app.get("/", dependencies=[Depends(log_route)])
    async def root(database: Database = Depends(get_db)) -> dict:
        # Liveness probe: the DB state goes in the payload, never in the status code.
        return {
            "message": settings.api_message(),
            "author": settings.api_author(),
            "dbStatus": await database.ping(),
        }

    return app


app = create_app()


if __name__ == "__main__":
    logger.info("Serviço rodando na porta: %s", settings.app_port())
    uvicorn.run(app, host=settings.app_host(), port=settings.app_port())
