from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class FileUploadResponse(BaseModel):
    id: str
    filename: str
    size: int
    mimetype: str
    upload_date: datetime

    model_config = ConfigDict(from_attributes=True)


class UploadFilesResponse(BaseModel):
    items: list[FileUploadResponse]


class FileInfoResponse(BaseModel):
    id: str
    filename: str
    size: int
    mimetype: str
    upload_date: datetime
    metadata: dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(from_attributes=True)


class FilePageResponse(BaseModel):
    kind: Literal["page"] = "page"
    items: list[FileInfoResponse]
    total: int
    page: int

    model_config = ConfigDict(from_attributes=True)


class CursorPageResponse(BaseModel):
    kind: Literal["cursor"] = "cursor"
    items: list[FileInfoResponse]
    next_cursor: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


ListFilesResponse = Annotated[
    Union[FilePageResponse, CursorPageResponse],
    Field(discriminator="kind"),
]


class ChatFilesResponse(BaseModel):
    items: list[FileInfoResponse]


class FileCountResponse(BaseModel):
    count: int


class RenameFileRequest(BaseModel):
    filename: Optional[str] = Field(default=None, max_length=255)
    metadata: Optional[dict[str, Any]] = None
