import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from file_manager.backend.app.domain.files import FileNotFound, FileStorageFailure, InvalidFileRequest

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(InvalidFileRequest)
    async def invalid_file_request(_: Request, exc: InvalidFileRequest):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": str(exc) or "Invalid file request"},
        )

    @app.exception_handler(FileNotFound)
    async def file_not_found(_: Request, exc: FileNotFound):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": str(exc)},
        )

    @app.exception_handler(FileStorageFailure)
    async def file_storage_failure(_: Request, exc: FileStorageFailure):
        logger.error("Storage failure: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc)},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception(_: Request, exc: Exception):
        logger.exception("Unhandled exception", exc_info=exc)

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "Internal server error"
            },
        )
