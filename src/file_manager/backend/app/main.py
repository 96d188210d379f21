from contextlib import asynccontextmanager

from fastapi import FastAPI

from file_manager.backend.app.api.v1.router import api_router
from file_manager.backend.app.core.deps import get_file_repository, get_mongo_client
from file_manager.backend.app.exception_handlers import register_exception_handlers
from file_manager.backend.app.infrastructure.db.init_db import init_db


def create_app():
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await init_db()
        yield
        await get_mongo_client().close()
        get_mongo_client.cache_clear()
        get_file_repository.cache_clear()

    app = FastAPI(lifespan=lifespan)
    app.include_router(api_router, prefix="/api/v1")

    @app.get("/health")
    def health():
        return {"status": "ok"}

    register_exception_handlers(app)
    return app


app = create_app()
