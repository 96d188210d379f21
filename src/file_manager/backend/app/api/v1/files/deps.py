from typing import Annotated

from fastapi import Depends

from file_manager.backend.app.application.files.use_cases import (
    CountFilesUseCase,
    DeleteFileUseCase,
    GetFileInfoUseCase,
    GetFileStreamUseCase,
    ListChatFilesUseCase,
    ListFilesUseCase,
    RenameFileUseCase,
    ReplaceFileUseCase,
    UploadFilesUseCase,
)
from file_manager.backend.app.core import get_file_repository, get_upload_limits
from file_manager.backend.app.domain.files import StoredFileRepository, UploadLimits

file_repo_dep = Annotated[StoredFileRepository, Depends(get_file_repository)]
upload_limits_dep = Annotated[UploadLimits, Depends(get_upload_limits)]


async def get_upload_files_use_case(
        file_repo: file_repo_dep,
        limits: upload_limits_dep,
) -> UploadFilesUseCase:
    return UploadFilesUseCase(file_repo, limits)


async def get_get_file_info_use_case(file_repo: file_repo_dep) -> GetFileInfoUseCase:
    return GetFileInfoUseCase(file_repo)


async def get_get_file_stream_use_case(file_repo: file_repo_dep) -> GetFileStreamUseCase:
    return GetFileStreamUseCase(file_repo)


async def get_list_files_use_case(file_repo: file_repo_dep) -> ListFilesUseCase:
    return ListFilesUseCase(file_repo)


async def get_rename_file_use_case(file_repo: file_repo_dep) -> RenameFileUseCase:
    return RenameFileUseCase(file_repo)


async def get_replace_file_use_case(
        file_repo: file_repo_dep,
        limits: upload_limits_dep,
) -> ReplaceFileUseCase:
    return ReplaceFileUseCase(file_repo, limits)


async def get_delete_file_use_case(file_repo: file_repo_dep) -> DeleteFileUseCase:
    return DeleteFileUseCase(file_repo)


async def get_count_files_use_case(file_repo: file_repo_dep) -> CountFilesUseCase:
    return CountFilesUseCase(file_repo)


async def get_list_chat_files_use_case(file_repo: file_repo_dep) -> ListChatFilesUseCase:
    return ListChatFilesUseCase(file_repo)
