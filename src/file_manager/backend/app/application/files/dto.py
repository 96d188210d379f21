from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, AsyncIterator, Optional, Union

from file_manager.backend.app.domain.files import SortField, SortOrder

DEFAULT_PAGE_SIZE = 50


# -------------------------
# Inputs
# -------------------------
@dataclass(frozen=True, slots=True)
class FileContentDTO:
    content: bytes
    filename: str
    mimetype: str
    size: Optional[int] = None  # declared size; falls back to len(content)

    @property
    def declared_size(self) -> int:
        return self.size if self.size is not None else len(self.content)


@dataclass(frozen=True, slots=True)
class UploadFileInputDTO:
    file: Optional[FileContentDTO]
    metadata: Optional[dict[str, Any]] = None


@dataclass(frozen=True, slots=True)
class UploadFilesInputDTO:
    files: list[FileContentDTO]
    metadata: Optional[dict[str, Any]] = None


@dataclass(frozen=True, slots=True)
class GetFileInputDTO:
    file_id: str


@dataclass(frozen=True, slots=True)
class ListFilesInputDTO:
    q: Optional[str] = None
    mimetype: Optional[str] = None
    sort_by: SortField = SortField.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC
    page: Optional[int] = None
    cursor: Optional[str] = None
    limit: int = DEFAULT_PAGE_SIZE


@dataclass(frozen=True, slots=True)
class RenameFileInputDTO:
    file_id: str
    filename: Optional[str] = None
    metadata: Optional[dict[str, Any]] = None


@dataclass(frozen=True, slots=True)
class ReplaceFileInputDTO:
    file_id: str
    file: Optional[FileContentDTO]
    metadata: Optional[dict[str, Any]] = None


@dataclass(frozen=True, slots=True)
class DeleteFileInputDTO:
    file_id: str


@dataclass(frozen=True, slots=True)
class ListChatFilesInputDTO:
    chat_id: str


# -------------------------
# Outputs
# -------------------------
@dataclass(frozen=True, slots=True)
class FileUploadResultDTO:
    id: str
    filename: str
    size: int
    mimetype: str
    upload_date: datetime


@dataclass(frozen=True, slots=True)
class FileInfoDTO:
    id: str
    filename: str
    size: int
    mimetype: str
    upload_date: datetime
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class FilePageDTO:
    items: list[FileInfoDTO]
    total: int
    page: int
    kind: str = "page"


@dataclass(frozen=True, slots=True)
class CursorPageDTO:
    items: list[FileInfoDTO]
    next_cursor: Optional[str] = None
    kind: str = "cursor"


ListFilesResultDTO = Union[FilePageDTO, CursorPageDTO]


@dataclass(frozen=True, slots=True)
class FileStreamDTO:
    info: FileInfoDTO
    stream: AsyncIterator[bytes]
