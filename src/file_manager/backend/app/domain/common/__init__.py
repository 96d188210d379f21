from datetime import datetime, timezone

from file_manager.backend.app.domain.common.formatting import format_bytes


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


__all__ = ['utcnow', 'format_bytes']
