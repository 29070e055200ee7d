from pydantic import Field
from pydantic_settings import SettingsConfigDict

from task_tracker.infrastructure.configuration.store_settings import StoreSettings


class Settings(StoreSettings):
    """
    Service settings.
    Inherits the store configuration from StoreSettings.
    """
    app_name: str = "Task Tracker"
    env: str = Field(default="local", alias="APP_ENV")
    log_level: str = "INFO"
    api_prefix: str = "/api/v1"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)
