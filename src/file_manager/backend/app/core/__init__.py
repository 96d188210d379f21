from file_manager.backend.app.core.config import settings
from file_manager.backend.app.core.deps import get_file_repository, get_upload_limits

__all__ = ['settings',
           'get_file_repository',
           'get_upload_limits']
