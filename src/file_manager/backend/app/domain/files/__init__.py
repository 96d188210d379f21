from .entities import StoredFile, DEFAULT_MIMETYPE
from .errors import InvalidFileRequest, FileNotFound, FileStorageFailure
from .repositories import StoredFileRepository
from .value_objects import ContentHash, CursorAnchor, FileQuery, SortField, SortOrder, UploadLimits

__all__ = [
    "StoredFile",
    "DEFAULT_MIMETYPE",
    "InvalidFileRequest",
    "FileNotFound",
    "FileStorageFailure",
    "StoredFileRepository",
    "ContentHash",
    "CursorAnchor",
    "FileQuery",
    "SortField",
    "SortOrder",
    "UploadLimits",
]
