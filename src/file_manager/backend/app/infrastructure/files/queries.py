"""
Pure builders for the Mongo documents the GridFS repository sends.
Kept free of I/O so the filter / sort / cursor rules can be checked without a server.
"""
from __future__ import annotations

import re
from typing import Any, Optional

from bson import ObjectId

from file_manager.backend.app.domain.files import CursorAnchor, FileQuery, SortField, SortOrder

SORT_VALUE_FIELD = "_sortValue"

_SORT_EXPRESSIONS: dict[SortField, Any] = {
    SortField.SIZE: "$length",
    SortField.CREATED_AT: "$uploadDate",
    SortField.UPDATED_AT: {"$ifNull": ["$metadata.updatedAt", "$uploadDate"]},
}

_TEXT_FIELDS = ("filename", "metadata.originalName", "metadata.description")


def build_filter(query: Optional[FileQuery]) -> dict[str, Any]:
    if query is None:
        return {}

    clauses: list[dict[str, Any]] = []
    if query.text:
        regex = {"$regex": re.escape(query.text), "$options": "i"}
        clauses.append({"$or": [{field: regex} for field in _TEXT_FIELDS]})
    if query.mimetype:
        clauses.append({"metadata.mimetype": query.mimetype})

    if not clauses:
        return {}
    if len(clauses) == 1:
        return clauses[0]
    return {"$and": clauses}


def build_cursor_match(anchor: CursorAnchor, order: SortOrder) -> dict[str, Any]:
    """Strictly after the anchor in (sort value, _id) order."""
    op = "$gt" if order is SortOrder.ASC else "$lt"
    anchor_id = ObjectId(anchor.file_id)
    return {
        "$or": [
            {SORT_VALUE_FIELD: {op: anchor.value}},
            {SORT_VALUE_FIELD: anchor.value, "_id": {op: anchor_id}},
        ]
    }


def build_sort(query: FileQuery) -> dict[str, int]:
    direction = query.sort_order.direction
    return {SORT_VALUE_FIELD: direction, "_id": direction}


def build_search_pipeline(
        query: FileQuery,
        *,
        limit: int,
        skip: int = 0,
        after: Optional[CursorAnchor] = None,
) -> list[dict[str, Any]]:
    pipeline: list[dict[str, Any]] = [
        {"$match": build_filter(query)},
        {"$addFields": {SORT_VALUE_FIELD: _SORT_EXPRESSIONS[query.sort_by]}},
    ]
    if after is not None:
        pipeline.append({"$match": build_cursor_match(after, query.sort_order)})
    pipeline.append({"$sort": build_sort(query)})
    if skip:
        pipeline.append({"$skip": skip})
    pipeline.append({"$limit": limit})
    pipeline.append({"$project": {SORT_VALUE_FIELD: 0}})
    return pipeline
