from __future__ import annotations

import logging
from typing import Optional

from file_manager.backend.app.application.files.dto import (
    FileUploadResultDTO,
    ReplaceFileInputDTO,
    UploadFileInputDTO,
)
from file_manager.backend.app.application.files.mappers import (
    merge_metadata_patch,
    stored_file_to_upload_result_dto,
)
from file_manager.backend.app.application.files.use_cases.upload_file import UploadFileUseCase
from file_manager.backend.app.domain.common import utcnow
from file_manager.backend.app.domain.files import (
    ContentHash,
    FileNotFound,
    InvalidFileRequest,
    StoredFile,
    StoredFileRepository,
    UploadLimits,
)

logger = logging.getLogger(__name__)


class ReplaceFileUseCase:
    """
    Swap the content of a file. GridFS records are immutable, so this is
    delete + upload: the result carries a new id and
    metadata.originalReplacedId points back at the old one.

    When the new (content, filename) is already stored under another id,
    that record becomes the replacement and gets the back-reference and
    the caller's metadata instead of a duplicate upload.
    """

    def __init__(self, file_repo: StoredFileRepository, limits: UploadLimits) -> None:
        self._file_repo = file_repo
        self._limits = limits
        self._upload = UploadFileUseCase(file_repo, limits)

    async def execute(self, dto: ReplaceFileInputDTO) -> FileUploadResultDTO:
        if dto.file is None:
            raise InvalidFileRequest("No file provided")
        self._limits.validate(size=dto.file.declared_size, mimetype=dto.file.mimetype)

        existing = await self._file_repo.get_by_id(dto.file_id)
        if existing is None:
            raise FileNotFound(dto.file_id)

        # the new content matters more than cleaning up the old record
        try:
            await self._file_repo.delete(existing.id)
        except Exception as e:
            logger.warning("Failed to delete existing file %s: %s", dto.file_id, e)

        content_hash = ContentHash.of(dto.file.content)
        duplicate = await self._file_repo.find_by_hash_and_name(content_hash.value, dto.file.filename)
        if duplicate is not None and duplicate.id != existing.id:
            linked = await self._link_duplicate(duplicate, existing, dto.metadata)
            if linked is not None:
                logger.info("Replaced file %s with existing duplicate %s", existing.id, linked.id)
                return stored_file_to_upload_result_dto(linked)

        metadata = {
            **existing.metadata,
            **(dto.metadata or {}),
            "originalReplacedId": existing.id,
            "updatedAt": utcnow(),
        }
        result = await self._upload.execute(UploadFileInputDTO(file=dto.file, metadata=metadata))
        logger.info("Replaced file %s with %s", existing.id, result.id)
        return result

    async def _link_duplicate(
            self,
            duplicate: StoredFile,
            replaced: StoredFile,
            patch: Optional[dict],
    ) -> Optional[StoredFile]:
        metadata = merge_metadata_patch(
            duplicate.metadata,
            patch,
            originalReplacedId=replaced.id,
            updatedAt=utcnow(),
        )
        # None when the duplicate vanished meanwhile; the caller uploads instead
        return await self._file_repo.update(duplicate.id, filename=None, metadata=metadata)
