from file_manager.backend.app.domain.files import StoredFileRepository


class CountFilesUseCase:
    def __init__(self, file_repo: StoredFileRepository) -> None:
        self._file_repo = file_repo

    async def execute(self) -> int:
        return await self._file_repo.count()
