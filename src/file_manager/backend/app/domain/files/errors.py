class InvalidFileRequest(Exception):
    """Raised when an upload / rename request is rejected before touching storage."""
    pass


class FileNotFound(Exception):
    def __init__(self, file_id: str):
        super().__init__(f"File with ID {file_id} not found")


class FileStorageFailure(Exception):
    def __init__(self, reason: str):
        super().__init__(f"Upload failed: {reason}")
