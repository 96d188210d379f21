from __future__ import annotations

from typing import Any, AsyncIterator, Optional, Sequence

from bson import ObjectId
from gridfs import AsyncGridFSBucket
from gridfs.asynchronous.grid_file import AsyncGridOut
from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.asynchronous.database import AsyncDatabase

from file_manager.backend.app.domain.files import CursorAnchor, FileQuery, StoredFile
from file_manager.backend.app.infrastructure.files.mappers import files_document_to_domain
from file_manager.backend.app.infrastructure.files.queries import build_filter, build_search_pipeline


def _parse_id(file_id: str) -> Optional[ObjectId]:
    if not ObjectId.is_valid(file_id):
        return None
    return ObjectId(file_id)


async def _iter_chunks(grid_out: AsyncGridOut) -> AsyncIterator[bytes]:
    # also runs when the client drops the download half-way
    try:
        while True:
            chunk = await grid_out.readchunk()
            if not chunk:
                break
            yield chunk
    finally:
        await grid_out.close()


class GridFSFileRepository:
    def __init__(self, db: AsyncDatabase, bucket_name: str = "fs") -> None:
        self._bucket = AsyncGridFSBucket(db, bucket_name=bucket_name)
        self._files = db[f"{bucket_name}.files"]

    async def ensure_indexes(self) -> None:
        # lookup speed only; (hash, filename) is deliberately not unique
        await self._files.create_index(
            [("metadata.hash", ASCENDING), ("filename", ASCENDING)],
            name="dedup_lookup",
        )
        await self._files.create_index([("metadata.chatId", ASCENDING)], name="chat_lookup")

    async def find_by_hash_and_name(self, content_hash: str, filename: str) -> Optional[StoredFile]:
        doc = await self._files.find_one({"metadata.hash": content_hash, "filename": filename})
        return files_document_to_domain(doc) if doc else None

    async def create(self, *, filename: str, content: bytes, metadata: dict[str, Any]) -> StoredFile:
        grid_in = self._bucket.open_upload_stream(filename, metadata=metadata)
        try:
            await grid_in.write(content)
            await grid_in.close()
        except Exception:
            # drop chunks written so far
            await grid_in.abort()
            raise

        return StoredFile(
            id=str(grid_in._id),
            filename=filename,
            size=grid_in.length,
            upload_date=grid_in.upload_date,
            metadata=metadata,
        )

    async def get_by_id(self, file_id: str) -> Optional[StoredFile]:
        oid = _parse_id(file_id)
        if oid is None:
            return None
        doc = await self._files.find_one({"_id": oid})
        return files_document_to_domain(doc) if doc else None

    async def open_stream(self, file_id: str) -> AsyncIterator[bytes]:
        oid = _parse_id(file_id)
        if oid is None:
            raise ValueError(f"Invalid file id: {file_id}")
        grid_out = await self._bucket.open_download_stream(oid)
        return _iter_chunks(grid_out)

    async def search(
            self,
            query: FileQuery,
            *,
            limit: int,
            skip: int = 0,
            after: Optional[CursorAnchor] = None,
    ) -> Sequence[StoredFile]:
        pipeline = build_search_pipeline(query, limit=limit, skip=skip, after=after)
        cursor = await self._files.aggregate(pipeline)
        docs = await cursor.to_list(length=None)
        return [files_document_to_domain(d) for d in docs]

    async def count(self, query: Optional[FileQuery] = None) -> int:
        return await self._files.count_documents(build_filter(query))

    async def update(
            self,
            file_id: str,
            *,
            filename: Optional[str],
            metadata: dict[str, Any],
    ) -> Optional[StoredFile]:
        oid = _parse_id(file_id)
        if oid is None:
            return None

        changes: dict[str, Any] = {"metadata": metadata}
        if filename:
            changes["filename"] = filename

        doc = await self._files.find_one_and_update(
            {"_id": oid},
            {"$set": changes},
            return_document=ReturnDocument.AFTER,
        )
        return files_document_to_domain(doc) if doc else None

    async def delete(self, file_id: str) -> None:
        oid = _parse_id(file_id)
        if oid is None:
            raise ValueError(f"Invalid file id: {file_id}")
        # raises gridfs.errors.NoFile when absent
        await self._bucket.delete(oid)

    async def list_by_chat(self, chat_id: str) -> Sequence[StoredFile]:
        cursor = self._files.find({"metadata.chatId": chat_id}).sort(
            [("uploadDate", DESCENDING), ("_id", DESCENDING)]
        )
        docs = await cursor.to_list(length=None)
        return [files_document_to_domain(d) for d in docs]
