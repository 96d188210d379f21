from __future__ import annotations

from typing import List

from file_manager.backend.app.application.files.dto import (
    FileUploadResultDTO,
    UploadFileInputDTO,
    UploadFilesInputDTO,
)
from file_manager.backend.app.application.files.use_cases.upload_file import UploadFileUseCase
from file_manager.backend.app.domain.files import InvalidFileRequest, StoredFileRepository, UploadLimits


class UploadFilesUseCase:
    """Sequential batch upload; the first failing file aborts the rest."""

    def __init__(self, file_repo: StoredFileRepository, limits: UploadLimits) -> None:
        self._upload = UploadFileUseCase(file_repo, limits)

    async def execute(self, dto: UploadFilesInputDTO) -> List[FileUploadResultDTO]:
        if not dto.files:
            raise InvalidFileRequest("No file provided")

        results: List[FileUploadResultDTO] = []
        for file in dto.files:
            result = await self._upload.execute(UploadFileInputDTO(file=file, metadata=dto.metadata))
            results.append(result)
        return results
