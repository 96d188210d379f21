from __future__ import annotations

import logging

from file_manager.backend.app.application.files.dto import FileUploadResultDTO, UploadFileInputDTO
from file_manager.backend.app.application.files.mappers import (
    build_upload_metadata,
    stored_file_to_upload_result_dto,
)
from file_manager.backend.app.domain.common import format_bytes
from file_manager.backend.app.domain.files import (
    ContentHash,
    FileStorageFailure,
    InvalidFileRequest,
    StoredFileRepository,
    UploadLimits,
)

logger = logging.getLogger(__name__)


class UploadFileUseCase:
    def __init__(self, file_repo: StoredFileRepository, limits: UploadLimits) -> None:
        self._file_repo = file_repo
        self._limits = limits

    async def execute(self, dto: UploadFileInputDTO) -> FileUploadResultDTO:
        file = dto.file
        if file is None:
            raise InvalidFileRequest("No file provided")

        # 1) Reject before any storage call
        self._limits.validate(size=file.declared_size, mimetype=file.mimetype)

        # 2) Dedup on (content hash, filename)
        content_hash = ContentHash.of(file.content)
        existing = await self._file_repo.find_by_hash_and_name(content_hash.value, file.filename)
        if existing is not None:
            logger.info("File already exists with same content and filename: %s", file.filename)
            return stored_file_to_upload_result_dto(existing)

        # 3) New record
        metadata = build_upload_metadata(file, content_hash, dto.metadata)
        logger.info("Uploading new file: %s (%s)", file.filename, format_bytes(file.declared_size))
        try:
            stored = await self._file_repo.create(
                filename=file.filename,
                content=file.content,
                metadata=metadata,
            )
        except Exception as e:
            raise FileStorageFailure(str(e)) from e

        return stored_file_to_upload_result_dto(stored)
