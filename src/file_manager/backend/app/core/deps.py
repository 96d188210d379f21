from functools import lru_cache

from pymongo import AsyncMongoClient

from file_manager.backend.app.core.config import settings
from file_manager.backend.app.domain.files import StoredFileRepository, UploadLimits
from file_manager.backend.app.infrastructure.db import create_mongo_client
from file_manager.backend.app.infrastructure.files.gridfs_repository import GridFSFileRepository


@lru_cache
def get_mongo_client() -> AsyncMongoClient:
    """
    One client per process, closed in the app lifespan.
    """
    return create_mongo_client(settings.MONGODB_URL)


@lru_cache
def get_file_repository() -> StoredFileRepository:
    """
    Singleton GridFS-backed repository.
    Swap implementation here without touching use cases.
    """
    db = get_mongo_client()[settings.MONGODB_DATABASE]
    return GridFSFileRepository(db, bucket_name=settings.GRIDFS_BUCKET_NAME)


@lru_cache
def get_upload_limits() -> UploadLimits:
    return UploadLimits(
        max_file_size=settings.MAX_FILE_SIZE,
        accepted_types=tuple(settings.ACCEPTED_FILE_TYPES),
    )
