from typing import Any, Optional
from urllib.parse import quote

from fastapi import UploadFile

from file_manager.backend.app.api.v1.files.schemas import (
    ChatFilesResponse,
    CursorPageResponse,
    FileInfoResponse,
    FilePageResponse,
    FileUploadResponse,
    UploadFilesResponse,
)
from file_manager.backend.app.application.files.dto import (
    FileContentDTO,
    FileInfoDTO,
    FilePageDTO,
    FileUploadResultDTO,
    ListFilesResultDTO,
)


def upload_file_to_content_dto(file: UploadFile, content: bytes) -> FileContentDTO:
    return FileContentDTO(
        content=content,
        filename=file.filename or "upload.bin",
        mimetype=file.content_type or "application/octet-stream",
        size=file.size if file.size is not None else len(content),
    )


def build_upload_metadata_form(
        chat_id: Optional[str],
        user_id: Optional[str],
        description: Optional[str],
) -> Optional[dict[str, Any]]:
    metadata = {
        key: value
        for key, value in (("chatId", chat_id), ("userId", user_id), ("description", description))
        if value
    }
    return metadata or None


def upload_results_to_schema(results: list[FileUploadResultDTO]) -> UploadFilesResponse:
    return UploadFilesResponse(items=[FileUploadResponse.model_validate(r) for r in results])


def list_result_to_schema(result: ListFilesResultDTO) -> FilePageResponse | CursorPageResponse:
    if isinstance(result, FilePageDTO):
        return FilePageResponse.model_validate(result)
    return CursorPageResponse.model_validate(result)


def chat_files_to_schema(files: list[FileInfoDTO]) -> ChatFilesResponse:
    return ChatFilesResponse(items=[FileInfoResponse.model_validate(f) for f in files])


def content_disposition(filename: str) -> str:
    return f"attachment; filename*=UTF-8''{quote(filename)}"
