# file_manager/backend/app/domain/files/value_objects.py
from __future__ import annotations

import hashlib
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Optional

from ..common.formatting import format_bytes
from .errors import InvalidFileRequest


class SortField(StrEnum):
    SIZE = "size"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"


class SortOrder(StrEnum):
    ASC = "asc"
    DESC = "desc"

    @property
    def direction(self) -> int:
        return 1 if self is SortOrder.ASC else -1


@dataclass(frozen=True, slots=True)
class ContentHash:
    value: str

    @classmethod
    def of(cls, content: bytes) -> "ContentHash":
        return cls(hashlib.sha256(content).hexdigest())


@dataclass(frozen=True, slots=True)
class UploadLimits:
    max_file_size: int
    accepted_types: tuple[str, ...] = ()

    def validate(self, *, size: int, mimetype: str) -> None:
        if size > self.max_file_size:
            raise InvalidFileRequest(
                f"File size ({format_bytes(size)}) exceeds maximum allowed size "
                f"({format_bytes(self.max_file_size)})"
            )

        # empty allow-list means no restriction
        if self.accepted_types and mimetype not in self.accepted_types:
            raise InvalidFileRequest(
                f"File type {mimetype} is not allowed. "
                f"Accepted types: {', '.join(self.accepted_types)}"
            )


@dataclass(frozen=True, slots=True)
class FileQuery:
    text: Optional[str] = None
    mimetype: Optional[str] = None
    sort_by: SortField = SortField.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC

    def __post_init__(self) -> None:
        # blank filters are the same as no filter
        text = self.text.strip() if self.text else ""
        mimetype = self.mimetype.strip() if self.mimetype else ""
        object.__setattr__(self, "text", text or None)
        object.__setattr__(self, "mimetype", mimetype or None)


@dataclass(frozen=True, slots=True)
class CursorAnchor:
    """Position of the last item seen: its sort value and id."""
    value: Any
    file_id: str
