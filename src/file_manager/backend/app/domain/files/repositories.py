from __future__ import annotations

from typing import Any, AsyncIterator, Optional, Protocol, Sequence

from .entities import StoredFile
from .value_objects import CursorAnchor, FileQuery


class StoredFileRepository(Protocol):
    async def find_by_hash_and_name(self, content_hash: str, filename: str) -> Optional[StoredFile]:
        ...

    async def create(self, *, filename: str, content: bytes, metadata: dict[str, Any]) -> StoredFile:
        """
        Write content + files document as one record.
        On failure nothing of the record may remain.
        """
        ...

    async def get_by_id(self, file_id: str) -> Optional[StoredFile]:
        """Malformed ids resolve to None."""
        ...

    async def open_stream(self, file_id: str) -> AsyncIterator[bytes]:
        ...

    async def search(
            self,
            query: FileQuery,
            *,
            limit: int,
            skip: int = 0,
            after: Optional[CursorAnchor] = None,
    ) -> Sequence[StoredFile]:
        ...

    async def count(self, query: Optional[FileQuery] = None) -> int:
        ...

    async def update(
            self,
            file_id: str,
            *,
            filename: Optional[str],
            metadata: dict[str, Any],
    ) -> Optional[StoredFile]:
        ...

    async def delete(self, file_id: str) -> None:
        """Raises on any failure, including an absent record."""
        ...

    async def list_by_chat(self, chat_id: str) -> Sequence[StoredFile]:
        ...
