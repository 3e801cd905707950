"""Display options for error reports, resolved from env vars and an optional TOML file.

These only affect how tickets.report prints errors; validation never reads them.
"""

from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path

import tomlkit
from loguru import logger
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

CONFIG_PATH = Path.home() / ".config" / "tickets" / "config.toml"


class ReportSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TICKETS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    color: bool = True
    show_causes: bool = True  # print "caused by:" lines under the error

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # init kwargs carry the [report] table, which env vars and .env override
        return env_settings, dotenv_settings, init_settings, file_secret_settings


@lru_cache(maxsize=1)
def _load_toml() -> tomlkit.TOMLDocument:
    """Load ~/.config/tickets/config.toml, returning empty document if missing."""
    if not CONFIG_PATH.exists():
        return tomlkit.document()
    with CONFIG_PATH.open() as fh:
        return tomlkit.load(fh)


def _report_table(config: Mapping) -> dict:
    table = config.get("report")
    if table is None:
        return {}
    # tomlkit tables are Mappings, not dicts
    if not isinstance(table, Mapping):
        raise ValueError(f"'report' in {CONFIG_PATH} must be a table, got {type(table).__name__}")
    return dict(table)


@lru_cache(maxsize=1)
def get_report_settings() -> ReportSettings:
    """Resolve report display options.

    Precedence (highest to lowest):
    1. TICKETS_* env vars
    2. TICKETS_* entries in .env in cwd
    3. [report] table in ~/.config/tickets/config.toml
    4. Built-in defaults (color on, causes shown)
    """
    file_defaults = _report_table(_load_toml())
    if file_defaults:
        logger.debug("Report defaults from {}: {}", CONFIG_PATH, sorted(file_defaults))
    settings = ReportSettings(**file_defaults)
    logger.debug("Resolved report settings: color={}, show_causes={}", settings.color, settings.show_causes)
    return settings
