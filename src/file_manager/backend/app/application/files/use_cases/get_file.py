from file_manager.backend.app.application.files.dto import FileInfoDTO, GetFileInputDTO
from file_manager.backend.app.application.files.mappers import stored_file_to_info_dto
from file_manager.backend.app.domain.files import FileNotFound, StoredFileRepository


class GetFileInfoUseCase:
    def __init__(self, file_repo: StoredFileRepository) -> None:
        self._file_repo = file_repo

    async def execute(self, dto: GetFileInputDTO) -> FileInfoDTO:
        try:
            file = await self._file_repo.get_by_id(dto.file_id)
        except Exception as e:
            raise FileNotFound(dto.file_id) from e
        if file is None:
            raise FileNotFound(dto.file_id)
        return stored_file_to_info_dto(file)
