from __future__ import annotations

from file_manager.backend.app.application.files.dto import FileInfoDTO, RenameFileInputDTO
from file_manager.backend.app.application.files.mappers import merge_metadata_patch, stored_file_to_info_dto
from file_manager.backend.app.domain.common import utcnow
from file_manager.backend.app.domain.files import FileNotFound, InvalidFileRequest, StoredFileRepository


class RenameFileUseCase:
    """Metadata-only update: id, content, size and hash stay as they are."""

    def __init__(self, file_repo: StoredFileRepository) -> None:
        self._file_repo = file_repo

    async def execute(self, dto: RenameFileInputDTO) -> FileInfoDTO:
        # whitespace-only names count as "no new name"; real names are kept verbatim
        new_name = dto.filename if dto.filename and dto.filename.strip() else None
        if new_name is None and dto.metadata is None:
            raise InvalidFileRequest("Provide a new filename or metadata to update")

        file = await self._file_repo.get_by_id(dto.file_id)
        if file is None:
            raise FileNotFound(dto.file_id)

        metadata = merge_metadata_patch(file.metadata, dto.metadata, updatedAt=utcnow())

        updated = await self._file_repo.update(
            file.id,
            filename=new_name,
            metadata=metadata,
        )
        if updated is None:
            # deleted between lookup and update
            raise FileNotFound(dto.file_id)
        return stored_file_to_info_dto(updated)
