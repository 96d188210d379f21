from __future__ import annotations

from typing import Any, Optional

from file_manager.backend.app.application.files.dto import (
    FileContentDTO,
    FileInfoDTO,
    FileUploadResultDTO,
    ListFilesInputDTO,
)
from file_manager.backend.app.domain.common import utcnow
from file_manager.backend.app.domain.files import ContentHash, FileQuery, StoredFile


def stored_file_to_info_dto(file: StoredFile) -> FileInfoDTO:
    return FileInfoDTO(
        id=file.id,
        filename=file.filename,
        size=file.size,
        mimetype=file.mimetype,
        upload_date=file.upload_date,
        metadata=dict(file.metadata),
    )


def stored_file_to_upload_result_dto(file: StoredFile) -> FileUploadResultDTO:
    return FileUploadResultDTO(
        id=file.id,
        filename=file.filename,
        size=file.size,
        mimetype=file.mimetype,
        upload_date=file.upload_date,
    )


def list_input_dto_to_query(dto: ListFilesInputDTO) -> FileQuery:
    return FileQuery(
        text=dto.q,
        mimetype=dto.mimetype,
        sort_by=dto.sort_by,
        sort_order=dto.sort_order,
    )


def build_upload_metadata(
        file: FileContentDTO,
        content_hash: ContentHash,
        extra: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    # caller fields first; integrity fields always describe the bytes being written
    metadata: dict[str, Any] = dict(extra or {})
    metadata.update(
        originalName=file.filename,
        mimetype=file.mimetype,
        size=file.declared_size,
        hash=content_hash.value,
        uploadedAt=utcnow(),
    )
    return metadata


INTEGRITY_FIELDS = ("originalName", "mimetype", "size", "hash", "uploadedAt")


def merge_metadata_patch(
        current: dict[str, Any],
        patch: Optional[dict[str, Any]],
        **stamps: Any,
) -> dict[str, Any]:
    """Apply caller fields over `current` without touching the integrity fields."""
    metadata = {**current, **(patch or {}), **stamps}
    for key in INTEGRITY_FIELDS:
        if key in current:
            metadata[key] = current[key]
    return metadata
