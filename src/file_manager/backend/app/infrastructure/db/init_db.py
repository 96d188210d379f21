from file_manager.backend.app.core.deps import get_file_repository


async def init_db() -> None:
    await get_file_repository().ensure_indexes()
