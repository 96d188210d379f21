# file_manager/backend/app/application/files/use_cases/__init__.py
from .upload_file import UploadFileUseCase
from .upload_files import UploadFilesUseCase
from .get_file import GetFileInfoUseCase
from .get_file_stream import GetFileStreamUseCase
from .list_files import ListFilesUseCase
from .rename_file import RenameFileUseCase
from .replace_file import ReplaceFileUseCase
from .delete_file import DeleteFileUseCase
from .count_files import CountFilesUseCase
from .list_chat_files import ListChatFilesUseCase

__all__ = [
    "UploadFileUseCase",
    "UploadFilesUseCase",
    "GetFileInfoUseCase",
    "GetFileStreamUseCase",
    "ListFilesUseCase",
    "RenameFileUseCase",
    "ReplaceFileUseCase",
    "DeleteFileUseCase",
    "CountFilesUseCase",
    "ListChatFilesUseCase",
]
