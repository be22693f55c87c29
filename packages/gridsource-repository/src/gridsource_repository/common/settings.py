from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

from gridsource_repository.common.logger import configure_logging

# Load environment variables from .env into os.environ
load_dotenv()


class Settings(BaseSettings):
    """Grid source settings backed by environment variables."""

    log_level: str = Field(default="INFO", validation_alias="GRIDSOURCE_LOG_LEVEL")
    log_json: bool = Field(
        default=False,
        validation_alias="GRIDSOURCE_LOG_JSON",
        description="Emit log records as JSON objects instead of text lines."
    )
    grid_config_path: str = Field(
        default="configs/grids.yaml",
        validation_alias="GRIDSOURCE_GRID_CONFIG",
        description="Path to the YAML file declaring grids and their repository sources."
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


settings = Settings()


def setup_logging(config: Optional[Settings] = None) -> None:
    """Configures the root logger from settings.

    Importing the package never touches the root logger; hosts that want the
    package's handler call this once from their entry point.

    Args:
        config (Settings): Settings to apply. Defaults to the environment settings.
    """
    config = config or settings
    configure_logging(level=config.log_level, json_format=config.log_json)
