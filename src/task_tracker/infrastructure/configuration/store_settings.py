from enum import StrEnum
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreBackend(StrEnum):
    FILE = "file"
    MEMORY = "memory"


class StoreSettings(BaseSettings):
    store_backend: StoreBackend = Field(default=StoreBackend.FILE, description="Task store backend")
    runtime_data_dir: Path = Path("./runtime_data")
    store_file_name: str = Field(default="tasks.json", description="Document file inside runtime_data_dir")
    store_connect_attempts: int = Field(
        default=1, ge=1, description="Connection attempts before the store is reported unavailable"
    )

    @property
    def store_file_path(self) -> Path:
        return self.runtime_data_dir / self.store_file_name

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
