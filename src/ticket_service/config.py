from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    metrics_enabled: bool = True

    # Refund the payment when seat reservation fails
    atomic_purchase: bool = False


settings = Settings()
