from task_tracker.infrastructure.configuration.client_settings import ClientSettings
from task_tracker.infrastructure.configuration.main_settings import Settings
from task_tracker.infrastructure.configuration.store_settings import StoreBackend, StoreSettings

__all__ = ["ClientSettings", "Settings", "StoreBackend", "StoreSettings"]
