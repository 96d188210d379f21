import pytest

from file_manager.backend.app.domain.files import UploadLimits
from tests.unit.fakes.file_repo import FakeStoredFileRepository


@pytest.fixture
def file_repo() -> FakeStoredFileRepository:
    return FakeStoredFileRepository()


@pytest.fixture
def limits() -> UploadLimits:
    return UploadLimits(max_file_size=1024)
