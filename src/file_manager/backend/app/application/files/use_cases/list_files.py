# file_manager/backend/app/application/files/use_cases/list_files.py
from __future__ import annotations

import asyncio
from typing import Optional

from file_manager.backend.app.application.files.dto import (
    DEFAULT_PAGE_SIZE,
    CursorPageDTO,
    FilePageDTO,
    ListFilesInputDTO,
    ListFilesResultDTO,
)
from file_manager.backend.app.application.files.mappers import (
    list_input_dto_to_query,
    stored_file_to_info_dto,
)
from file_manager.backend.app.domain.files import CursorAnchor, FileQuery, StoredFileRepository


class ListFilesUseCase:
    """
    Search / filter / sort over all stored files.

    Two shapes of result:
    - cursor given -> CursorPageDTO, keyset pagination on (sort value, id)
    - otherwise    -> FilePageDTO, skip/limit pagination plus total count

    Both order by the sort value and then by id in the same direction, so
    records with equal sort values never swap places between pages.
    """

    def __init__(self, file_repo: StoredFileRepository) -> None:
        self._file_repo = file_repo

    async def execute(self, dto: ListFilesInputDTO) -> ListFilesResultDTO:
        query = list_input_dto_to_query(dto)
        limit = dto.limit if dto.limit and dto.limit > 0 else DEFAULT_PAGE_SIZE

        if dto.cursor:
            return await self._cursor_page(query, dto.cursor, limit)
        return await self._numbered_page(query, dto.page, limit)

    async def _cursor_page(self, query: FileQuery, cursor: str, limit: int) -> CursorPageDTO:
        anchor = await self._resolve_anchor(query, cursor)
        files = await self._file_repo.search(query, limit=limit, after=anchor)

        next_cursor = files[-1].id if files and len(files) == limit else None
        return CursorPageDTO(
            items=[stored_file_to_info_dto(f) for f in files],
            next_cursor=next_cursor,
        )

    async def _numbered_page(self, query: FileQuery, page: Optional[int], limit: int) -> FilePageDTO:
        page_num = page if page and page > 0 else 1
        skip = (page_num - 1) * limit

        files, total = await asyncio.gather(
            self._file_repo.search(query, limit=limit, skip=skip),
            self._file_repo.count(query),
        )
        return FilePageDTO(
            items=[stored_file_to_info_dto(f) for f in files],
            total=total,
            page=page_num,
        )

    async def _resolve_anchor(self, query: FileQuery, cursor: str) -> Optional[CursorAnchor]:
        # an unknown or malformed cursor restarts from the first page
        try:
            last_seen = await self._file_repo.get_by_id(cursor)
        except Exception:
            return None
        if last_seen is None:
            return None
        return CursorAnchor(value=last_seen.sort_value(query.sort_by), file_id=last_seen.id)
