from typing import Any, Mapping

from file_manager.backend.app.domain.files import StoredFile


def files_document_to_domain(doc: Mapping[str, Any]) -> StoredFile:
    return StoredFile(
        id=str(doc["_id"]),
        filename=doc.get("filename") or "",
        size=int(doc.get("length") or 0),
        upload_date=doc["uploadDate"],
        metadata=dict(doc.get("metadata") or {}),
    )
