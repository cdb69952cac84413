"""Settings for rendering and logging.

Values come from, in order of precedence: ``GRIDKIT_*`` environment variables
(``LOG_LEVEL`` is also honoured on its own), an optional JSON file, and the
defaults below. The JSON file defaults to ``~/.gridkit.json`` and can be moved
with ``GRIDKIT_CONFIG``; a missing file is not an error.
"""

from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

DEFAULT_CONFIG_PATH = Path().home() / ".gridkit.json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="GRIDKIT_", populate_by_name=True)

    LOG_LEVEL: str = Field(
        "INFO", validation_alias=AliasChoices("GRIDKIT_LOG_LEVEL", "LOG_LEVEL")
    )
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"
    ELEMENT_SEPARATOR: str = ", "
    ROW_DELIMITER: str = "\n"
    TUPLE_SEPARATOR: str = " , "
    BANNER_WIDTH: int = Field(10, ge=0)
    CONFIG: Path = DEFAULT_CONFIG_PATH

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Init values carry the JSON file, so the environment must win over them
        return env_settings, init_settings

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        """Load settings, reading the JSON file at ``path`` or ``GRIDKIT_CONFIG``."""
        config_path = Path(path) if path is not None else cls().CONFIG
        file_values = JsonConfigSettingsSource(cls, json_file=config_path)()
        return cls(**{**file_values, "CONFIG": config_path})


settings = Settings.load()
