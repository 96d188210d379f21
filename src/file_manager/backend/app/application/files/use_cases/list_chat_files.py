from __future__ import annotations

from typing import List

from file_manager.backend.app.application.files.dto import FileInfoDTO, ListChatFilesInputDTO
from file_manager.backend.app.application.files.mappers import stored_file_to_info_dto
from file_manager.backend.app.domain.files import StoredFileRepository


class ListChatFilesUseCase:
    def __init__(self, file_repo: StoredFileRepository) -> None:
        self._file_repo = file_repo

    async def execute(self, dto: ListChatFilesInputDTO) -> List[FileInfoDTO]:
        files = await self._file_repo.list_by_chat(dto.chat_id)
        return [stored_file_to_info_dto(f) for f in files]
