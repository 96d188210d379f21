from __future__ import annotations

import logging

from file_manager.backend.app.application.files.dto import DeleteFileInputDTO
from file_manager.backend.app.domain.files import FileNotFound, StoredFileRepository

logger = logging.getLogger(__name__)


class DeleteFileUseCase:
    def __init__(self, file_repo: StoredFileRepository) -> None:
        self._file_repo = file_repo

    async def execute(self, dto: DeleteFileInputDTO) -> None:
        # GridFS does not tell "already gone" apart from other delete errors
        try:
            await self._file_repo.delete(dto.file_id)
        except Exception as e:
            raise FileNotFound(dto.file_id) from e
        logger.info("Deleted file %s", dto.file_id)
