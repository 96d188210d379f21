# file_manager/backend/app/domain/files/entities.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from .value_objects import SortField

DEFAULT_MIMETYPE = "application/octet-stream"


@dataclass
class StoredFile:
    """
    One GridFS record: the files document projected into domain terms.
    Integrity fields (hash, declared size, mimetype) live under `metadata`.
    """
    id: str
    filename: str
    size: int  # stored byte length
    upload_date: datetime
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def mimetype(self) -> str:
        return self.metadata.get("mimetype") or DEFAULT_MIMETYPE

    @property
    def content_hash(self) -> Optional[str]:
        return self.metadata.get("hash")

    @property
    def chat_id(self) -> Optional[str]:
        return self.metadata.get("chatId")

    @property
    def updated_at(self) -> datetime:
        # never-updated files count as updated at upload time
        return self.metadata.get("updatedAt") or self.upload_date

    def sort_value(self, sort_by: SortField) -> Any:
        if sort_by == SortField.SIZE:
            return self.size
        if sort_by == SortField.UPDATED_AT:
            return self.updated_at
        return self.upload_date
