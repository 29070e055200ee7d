from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    base_url: str = Field(default="http://localhost:8000/api/v1", description="Task service API root")
    page_size: int = Field(default=5, gt=0)
    timeout_seconds: float = 10.0

    model_config = SettingsConfigDict(env_prefix="TASK_CLIENT_", env_file=".env", extra="ignore")
