from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', case_sensitive=True)
    MONGODB_URL: str = 'mongodb://localhost:27017'
    MONGODB_DATABASE: str = 'file_manager'
    GRIDFS_BUCKET_NAME: str = 'fs'
    MAX_FILE_SIZE: int = 10 * 1024 * 1024
    # JSON list in env, e.g. ACCEPTED_FILE_TYPES='["image/png","application/pdf"]'
    ACCEPTED_FILE_TYPES: List[str] = []
    DEFAULT_PAGE_SIZE: int = 50
    MAX_PAGE_SIZE: int = 200
    TEST_MONGODB_URL: Optional[str] = None


settings = Settings()
