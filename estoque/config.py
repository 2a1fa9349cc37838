import logging
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    api_base: str = Field("http://localhost:3333")
    request_timeout: float = Field(10.0)
    token_file: Path = Field(Path.home() / ".estoque" / "storage.json")
    success_banner_seconds: float = Field(3.0)
    banner_poll_seconds: float = Field(1.0)
    log_level: str = Field("INFO")

    model_config = SettingsConfigDict(
        env_prefix="ESTOQUE_",
        env_file=".env",
        extra="ignore",
    )


settings = Settings()

API_BASE = settings.api_base


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
