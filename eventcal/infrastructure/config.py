from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field, IPvAnyAddress
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

CONFIG_FILE_ENV = "EVENTCAL_CONFIG_FILE"


class Settings(BaseSettings):
    """
    Resolved in priority order: init kwargs, EVENTCAL_* environment variables,
    the YAML config file, then the defaults below. A missing config file is fine.
    """
    model_config = SettingsConfigDict(env_prefix="EVENTCAL_", validate_default=True, extra="ignore")

    address: IPvAnyAddress = "127.0.0.1"
    port: int = Field(default=8080, ge=0, le=65535)
    log_level: str = "INFO"
    openapi_path: Path = Path(__file__).resolve().parents[1] / "openapi/openapi.yaml"
    # 503 for duplicate / missing events; False switches to 409 / 404
    legacy_status_codes: bool = True

    @classmethod
    def settings_customise_sources(
            cls,
            settings_cls: type[BaseSettings],
            init_settings: PydanticBaseSettingsSource,
            env_settings: PydanticBaseSettingsSource,
            dotenv_settings: PydanticBaseSettingsSource,
            file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        yaml_file = Path(os.environ.get(CONFIG_FILE_ENV, "config.yaml"))
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls, yaml_file=yaml_file),
        )


settings = Settings()
