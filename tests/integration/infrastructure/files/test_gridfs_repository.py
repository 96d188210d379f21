from __future__ import annotations

import pytest

from file_manager.backend.app.core.config import settings
from file_manager.backend.app.application.files.dto import (
    CursorPageDTO,
    FileContentDTO,
    ListFilesInputDTO,
    RenameFileInputDTO,
    ReplaceFileInputDTO,
    UploadFileInputDTO,
)
from file_manager.backend.app.application.files.use_cases import (
    ListFilesUseCase,
    RenameFileUseCase,
    ReplaceFileUseCase,
    UploadFileUseCase,
)
from file_manager.backend.app.domain.files import ContentHash, FileQuery, SortField, SortOrder, UploadLimits


pytestmark = [
    pytest.mark.asyncio,
    pytest.mark.skipif(not settings.TEST_MONGODB_URL, reason="TEST_MONGODB_URL is not set"),
]

LIMITS = UploadLimits(max_file_size=1024 * 1024)


async def _upload(repo, content: bytes, filename: str, mimetype: str = "text/plain", metadata=None):
    return await UploadFileUseCase(repo, LIMITS).execute(
        UploadFileInputDTO(
            file=FileContentDTO(content=content, filename=filename, mimetype=mimetype),
            metadata=metadata,
        )
    )


async def test_create_get_and_stream_round_trip(gridfs_repo):
    out = await _upload(gridfs_repo, b"chunked bytes" * 100, "big.txt", metadata={"chatId": "c1"})

    stored = await gridfs_repo.get_by_id(out.id)
    assert stored is not None
    assert stored.size == len(b"chunked bytes" * 100)
    assert stored.content_hash == ContentHash.of(b"chunked bytes" * 100).value
    assert stored.chat_id == "c1"

    stream = await gridfs_repo.open_stream(out.id)
    data = b"".join([chunk async for chunk in stream])
    assert data == b"chunked bytes" * 100


async def test_malformed_id_resolves_to_none(gridfs_repo):
    assert await gridfs_repo.get_by_id("not-an-object-id") is None


async def test_dedup_hits_existing_record(gridfs_repo):
    first = await _upload(gridfs_repo, b"same", "same.txt")
    second = await _upload(gridfs_repo, b"same", "same.txt")
    third = await _upload(gridfs_repo, b"same", "other.txt")

    assert first.id == second.id
    assert third.id != first.id
    assert await gridfs_repo.count() == 2


async def test_size_desc_cursor_walk(gridfs_repo):
    for name, size in (("ten", 10), ("thirty", 30), ("twenty", 20)):
        await _upload(gridfs_repo, b"x" * size, name)
    use_case = ListFilesUseCase(gridfs_repo)

    first = await use_case.execute(
        ListFilesInputDTO(sort_by=SortField.SIZE, sort_order=SortOrder.DESC, limit=2, cursor="bad")
    )
    assert isinstance(first, CursorPageDTO)
    assert [f.size for f in first.items] == [30, 20]

    second = await use_case.execute(
        ListFilesInputDTO(
            sort_by=SortField.SIZE,
            sort_order=SortOrder.DESC,
            limit=2,
            cursor=first.next_cursor,
        )
    )
    assert [f.size for f in second.items] == [10]
    assert second.next_cursor is None


async def test_search_text_and_mimetype(gridfs_repo):
    await _upload(gridfs_repo, b"1", "Cat.png", mimetype="image/png")
    await _upload(gridfs_repo, b"2", "cat.txt")
    await _upload(gridfs_repo, b"3", "dog.png", mimetype="image/png", metadata={"description": "a CAT photo"})

    query = FileQuery(text="cat", mimetype="image/png")
    found = await gridfs_repo.search(query, limit=10)

    assert {f.filename for f in found} == {"Cat.png", "dog.png"}
    assert await gridfs_repo.count(query) == 2


async def test_rename_and_replace(gridfs_repo):
    out = await _upload(gridfs_repo, b"v1", "doc.txt")

    renamed = await RenameFileUseCase(gridfs_repo).execute(
        RenameFileInputDTO(file_id=out.id, filename="doc-renamed.txt")
    )
    assert renamed.id == out.id
    assert renamed.filename == "doc-renamed.txt"

    replaced = await ReplaceFileUseCase(gridfs_repo, LIMITS).execute(
        ReplaceFileInputDTO(
            file_id=out.id,
            file=FileContentDTO(content=b"v2", filename="doc.txt", mimetype="text/plain"),
        )
    )
    assert replaced.id != out.id
    assert await gridfs_repo.get_by_id(out.id) is None
    stored = await gridfs_repo.get_by_id(replaced.id)
    assert stored.metadata["originalReplacedId"] == out.id


async def test_delete_missing_raises(gridfs_repo):
    out = await _upload(gridfs_repo, b"gone", "gone.txt")
    await gridfs_repo.delete(out.id)

    with pytest.raises(Exception):
        await gridfs_repo.delete(out.id)


async def test_list_by_chat_newest_first(gridfs_repo):
    older = await _upload(gridfs_repo, b"1", "a.txt", metadata={"chatId": "c1"})
    newer = await _upload(gridfs_repo, b"2", "b.txt", metadata={"chatId": "c1"})
    await _upload(gridfs_repo, b"3", "c.txt", metadata={"chatId": "c2"})

    files = await gridfs_repo.list_by_chat("c1")

    assert [f.id for f in files] == [newer.id, older.id]
