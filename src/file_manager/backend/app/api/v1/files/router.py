from typing import Annotated, Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from fastapi.responses import StreamingResponse

from file_manager.backend.app.api.v1.files.deps import (
    get_count_files_use_case,
    get_delete_file_use_case,
    get_get_file_info_use_case,
    get_get_file_stream_use_case,
    get_list_chat_files_use_case,
    get_list_files_use_case,
    get_rename_file_use_case,
    get_replace_file_use_case,
    get_upload_files_use_case,
)
from file_manager.backend.app.api.v1.files.mappers import (
    build_upload_metadata_form,
    chat_files_to_schema,
    content_disposition,
    list_result_to_schema,
    upload_file_to_content_dto,
    upload_results_to_schema,
)
from file_manager.backend.app.api.v1.files.schemas import (
    ChatFilesResponse,
    FileCountResponse,
    FileInfoResponse,
    FileUploadResponse,
    ListFilesResponse,
    RenameFileRequest,
    UploadFilesResponse,
)
from file_manager.backend.app.application.files.dto import (
    DeleteFileInputDTO,
    GetFileInputDTO,
    ListChatFilesInputDTO,
    ListFilesInputDTO,
    RenameFileInputDTO,
    ReplaceFileInputDTO,
    UploadFilesInputDTO,
)
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
from file_manager.backend.app.core.config import settings
from file_manager.backend.app.domain.files import SortField, SortOrder

router = APIRouter(prefix="/files", tags=["files"])

upload_files_dep = Annotated[UploadFilesUseCase, Depends(get_upload_files_use_case)]
get_file_info_dep = Annotated[GetFileInfoUseCase, Depends(get_get_file_info_use_case)]
get_file_stream_dep = Annotated[GetFileStreamUseCase, Depends(get_get_file_stream_use_case)]
list_files_dep = Annotated[ListFilesUseCase, Depends(get_list_files_use_case)]
rename_file_dep = Annotated[RenameFileUseCase, Depends(get_rename_file_use_case)]
replace_file_dep = Annotated[ReplaceFileUseCase, Depends(get_replace_file_use_case)]
delete_file_dep = Annotated[DeleteFileUseCase, Depends(get_delete_file_use_case)]
count_files_dep = Annotated[CountFilesUseCase, Depends(get_count_files_use_case)]
list_chat_files_dep = Annotated[ListChatFilesUseCase, Depends(get_list_chat_files_use_case)]


@router.post("", response_model=UploadFilesResponse, status_code=status.HTTP_201_CREATED)
async def upload_files(
        use_case: upload_files_dep,
        files: list[UploadFile] = File(...),
        chat_id: Annotated[Optional[str], Form()] = None,
        user_id: Annotated[Optional[str], Form()] = None,
        description: Annotated[Optional[str], Form()] = None,
):
    contents = [upload_file_to_content_dto(f, await f.read()) for f in files]
    dto = UploadFilesInputDTO(
        files=contents,
        metadata=build_upload_metadata_form(chat_id, user_id, description),
    )
    results = await use_case.execute(dto)
    return upload_results_to_schema(results)


@router.get("", response_model=ListFilesResponse)
async def list_files(
        use_case: list_files_dep,
        q: Optional[str] = None,
        mimetype: Optional[str] = None,
        sort_by: Annotated[SortField, Query(alias="sortBy")] = SortField.CREATED_AT,
        sort_order: Annotated[SortOrder, Query(alias="sortOrder")] = SortOrder.DESC,
        limit: Annotated[Optional[int], Query(ge=1, le=settings.MAX_PAGE_SIZE)] = None,
        page: Optional[int] = None,
        cursor: Optional[str] = None,
):
    dto = ListFilesInputDTO(
        q=q,
        mimetype=mimetype,
        sort_by=sort_by,
        sort_order=sort_order,
        limit=limit or min(settings.DEFAULT_PAGE_SIZE, settings.MAX_PAGE_SIZE),
        page=page,
        cursor=cursor,
    )
    result = await use_case.execute(dto)
    return list_result_to_schema(result)


@router.get("/count", response_model=FileCountResponse)
async def count_files(use_case: count_files_dep):
    return FileCountResponse(count=await use_case.execute())


@router.get("/chat/{chat_id}", response_model=ChatFilesResponse)
async def list_chat_files(use_case: list_chat_files_dep, chat_id: str):
    files = await use_case.execute(ListChatFilesInputDTO(chat_id=chat_id))
    return chat_files_to_schema(files)


@router.get("/{file_id}", response_model=FileInfoResponse)
async def get_file_info(use_case: get_file_info_dep, file_id: str):
    info = await use_case.execute(GetFileInputDTO(file_id=file_id))
    return FileInfoResponse.model_validate(info)


@router.get("/{file_id}/download")
async def download_file(use_case: get_file_stream_dep, file_id: str) -> StreamingResponse:
    result = await use_case.execute(GetFileInputDTO(file_id=file_id))
    return StreamingResponse(
        result.stream,
        media_type=result.info.mimetype,
        headers={
            "Content-Disposition": content_disposition(result.info.filename),
            "Content-Length": str(result.info.size),
        },
    )


@router.patch("/{file_id}", response_model=FileInfoResponse)
async def rename_file(
        use_case: rename_file_dep,
        file_id: str,
        body: RenameFileRequest,
) -> FileInfoResponse:
    dto = RenameFileInputDTO(file_id=file_id, filename=body.filename, metadata=body.metadata)
    info = await use_case.execute(dto)
    return FileInfoResponse.model_validate(info)


@router.put("/{file_id}", response_model=FileUploadResponse)
async def replace_file(
        use_case: replace_file_dep,
        file_id: str,
        file: UploadFile = File(...),
        description: Annotated[Optional[str], Form()] = None,
) -> FileUploadResponse:
    content = await file.read()
    dto = ReplaceFileInputDTO(
        file_id=file_id,
        file=upload_file_to_content_dto(file, content),
        metadata={"description": description} if description else None,
    )
    result = await use_case.execute(dto)
    return FileUploadResponse.model_validate(result)


@router.delete("/{file_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_file(use_case: delete_file_dep, file_id: str) -> None:
    await use_case.execute(DeleteFileInputDTO(file_id=file_id))
    return None
