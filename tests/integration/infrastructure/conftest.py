import uuid

import pytest_asyncio

from file_manager.backend.app.core.config import settings
from file_manager.backend.app.infrastructure.db import create_mongo_client
from file_manager.backend.app.infrastructure.files.gridfs_repository import GridFSFileRepository


@pytest_asyncio.fixture
async def mongo_db():
    client = create_mongo_client(settings.TEST_MONGODB_URL)
    # throwaway database per test -> nothing leaks between tests
    db_name = f"file_manager_test_{uuid.uuid4().hex[:12]}"
    try:
        yield client[db_name]
    finally:
        await client.drop_database(db_name)
        await client.close()


@pytest_asyncio.fixture
async def gridfs_repo(mongo_db) -> GridFSFileRepository:
    repo = GridFSFileRepository(mongo_db, bucket_name="fs")
    await repo.ensure_indexes()
    return repo
