from __future__ import annotations

import pytest

from file_manager.backend.app.application.files.dto import (
    CursorPageDTO,
    FilePageDTO,
    ListFilesInputDTO,
)
from file_manager.backend.app.application.files.use_cases import ListFilesUseCase
from file_manager.backend.app.domain.files import SortField, SortOrder


pytestmark = pytest.mark.asyncio


async def _seed(file_repo, *specs: tuple[str, int, dict]) -> list[str]:
    ids = []
    for filename, size, metadata in specs:
        stored = await file_repo.create(
            filename=filename,
            content=b"x" * size,
            metadata={"mimetype": "text/plain", **metadata},
        )
        ids.append(stored.id)
    return ids


async def test_size_desc_cursor_walk(file_repo):
    await _seed(file_repo, ("ten", 10, {}), ("thirty", 30, {}), ("twenty", 20, {}))
    use_case = ListFilesUseCase(file_repo)

    first = await use_case.execute(
        ListFilesInputDTO(sort_by=SortField.SIZE, sort_order=SortOrder.DESC, limit=2, cursor="start")
    )
    assert isinstance(first, CursorPageDTO)
    assert [f.size for f in first.items] == [30, 20]
    assert first.next_cursor == first.items[-1].id

    second = await use_case.execute(
        ListFilesInputDTO(
            sort_by=SortField.SIZE,
            sort_order=SortOrder.DESC,
            limit=2,
            cursor=first.next_cursor,
        )
    )
    assert isinstance(second, CursorPageDTO)
    assert [f.size for f in second.items] == [10]
    assert second.next_cursor is None


async def test_unknown_cursor_starts_from_beginning(file_repo):
    ids = await _seed(file_repo, ("a", 1, {}), ("b", 2, {}))
    use_case = ListFilesUseCase(file_repo)

    out = await use_case.execute(ListFilesInputDTO(cursor="not-an-id", limit=10))

    assert isinstance(out, CursorPageDTO)
    # default sort: newest upload first
    assert [f.id for f in out.items] == list(reversed(ids))
    assert out.next_cursor is None


async def test_page_mode_defaults_and_total(file_repo):
    await _seed(file_repo, *[(f"f{i}", i + 1, {}) for i in range(5)])
    use_case = ListFilesUseCase(file_repo)

    out = await use_case.execute(ListFilesInputDTO(limit=2, page=0))

    assert isinstance(out, FilePageDTO)
    assert out.page == 1
    assert out.total == 5
    assert len(out.items) == 2

    last = await use_case.execute(ListFilesInputDTO(limit=2, page=3))
    assert last.page == 3
    assert len(last.items) == 1


async def test_text_query_matches_name_original_name_and_description(file_repo):
    await _seed(
        file_repo,
        ("Report.PDF", 1, {}),
        ("scan.png", 1, {"originalName": "old-report.png"}),
        ("notes.txt", 1, {"description": "quarterly REPORT draft"}),
        ("other.txt", 1, {}),
    )
    use_case = ListFilesUseCase(file_repo)

    out = await use_case.execute(ListFilesInputDTO(q="  report "))

    assert isinstance(out, FilePageDTO)
    assert out.total == 3
    assert {f.filename for f in out.items} == {"Report.PDF", "scan.png", "notes.txt"}


async def test_text_query_is_literal_not_a_pattern(file_repo):
    await _seed(file_repo, ("a.b", 1, {}), ("axb", 1, {}))
    use_case = ListFilesUseCase(file_repo)

    out = await use_case.execute(ListFilesInputDTO(q="a.b"))

    assert [f.filename for f in out.items] == ["a.b"]


async def test_mimetype_filter_combines_with_text_query(file_repo):
    await _seed(
        file_repo,
        ("cat.png", 1, {"mimetype": "image/png"}),
        ("cat.txt", 1, {"mimetype": "text/plain"}),
        ("dog.png", 1, {"mimetype": "image/png"}),
    )
    use_case = ListFilesUseCase(file_repo)

    out = await use_case.execute(ListFilesInputDTO(q="cat", mimetype="image/png"))

    assert [f.filename for f in out.items] == ["cat.png"]
    assert out.total == 1


async def test_equal_sort_values_are_ordered_by_id(file_repo):
    ids = await _seed(file_repo, ("a", 5, {}), ("b", 5, {}), ("c", 5, {}))
    use_case = ListFilesUseCase(file_repo)

    asc = await use_case.execute(ListFilesInputDTO(sort_by=SortField.SIZE, sort_order=SortOrder.ASC))
    desc = await use_case.execute(ListFilesInputDTO(sort_by=SortField.SIZE, sort_order=SortOrder.DESC))

    assert [f.id for f in asc.items] == ids
    assert [f.id for f in desc.items] == list(reversed(ids))


@pytest.mark.parametrize("sort_by", list(SortField))
@pytest.mark.parametrize("sort_order", list(SortOrder))
async def test_cursor_and_page_walks_enumerate_same_ids(file_repo, sort_by, sort_order):
    sizes = [7, 3, 7, 1, 9, 3, 3, 12, 7]
    await _seed(file_repo, *[(f"f{i}", s, {}) for i, s in enumerate(sizes)])
    # give a couple of files an update stamp so updatedAt differs from upload time
    for file_id in file_repo.all_ids()[:2]:
        stored = await file_repo.get_by_id(file_id)
        await file_repo.update(
            file_id,
            filename=None,
            metadata={**stored.metadata, "updatedAt": stored.upload_date.replace(year=2030)},
        )
    use_case = ListFilesUseCase(file_repo)

    paged: list[str] = []
    page = 1
    while True:
        out = await use_case.execute(
            ListFilesInputDTO(sort_by=sort_by, sort_order=sort_order, limit=2, page=page)
        )
        if not out.items:
            break
        paged.extend(f.id for f in out.items)
        page += 1

    walked: list[str] = []
    cursor = "begin"
    while cursor:
        out = await use_case.execute(
            ListFilesInputDTO(sort_by=sort_by, sort_order=sort_order, limit=2, cursor=cursor)
        )
        walked.extend(f.id for f in out.items)
        cursor = out.next_cursor

    assert len(paged) == len(set(paged)) == len(sizes)
    assert walked == paged
