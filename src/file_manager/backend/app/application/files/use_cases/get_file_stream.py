from __future__ import annotations

from file_manager.backend.app.application.files.dto import FileStreamDTO, GetFileInputDTO
from file_manager.backend.app.application.files.use_cases.get_file import GetFileInfoUseCase
from file_manager.backend.app.domain.files import FileNotFound, StoredFileRepository


class GetFileStreamUseCase:
    def __init__(self, file_repo: StoredFileRepository) -> None:
        self._file_repo = file_repo
        self._get_info = GetFileInfoUseCase(file_repo)

    async def execute(self, dto: GetFileInputDTO) -> FileStreamDTO:
        info = await self._get_info.execute(dto)
        try:
            stream = await self._file_repo.open_stream(info.id)
        except Exception as e:
            raise FileNotFound(dto.file_id) from e
        return FileStreamDTO(info=info, stream=stream)
