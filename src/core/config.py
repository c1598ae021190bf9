"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno y `config.toml` (pydantic-settings) sin
  contaminar la CLI.
- Permite que adaptadores (HTTP) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from core.domain.errors import ConfigError

DEFAULT_BASE_URL = "https://members-ng.iracing.com/"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "irating-fetch"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "irating-fetch"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "irating-fetch"
    return Path.home() / ".config" / "irating-fetch"


def get_user_config_file() -> Path:
    return get_user_config_dir() / "config.toml"


class AuthSettings(BaseModel):
    """Credenciales de iRacing. Si faltan, la CLI las pide por teclado."""

    email: str | None = Field(
        default=None,
        description="Email de la cuenta de iRacing.",
    )
    password: str | None = Field(
        default=None,
        description="Password en claro; solo se envía su hash.",
    )


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars, TOML) sin ensuciar el Core.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="IRATING_FETCH_",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        # Orden: config global de usuario, luego la del proyecto (gana la última).
        toml_file=(str(get_user_config_file()), "config.toml"),
    )

    auth: AuthSettings = Field(default_factory=AuthSettings)

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="Origen de la API de datos de iRacing.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="irating-fetch/0.1",
        min_length=1,
        description="User-Agent para las peticiones a la API.",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            TomlConfigSettingsSource(settings_cls),
        )


def load_settings(config_file: Path | None = None) -> AppSettings:
    """Carga la configuración; `config_file` explícito tiene prioridad sobre env.

    TOML roto o valores fuera de rango (fichero o `IRATING_FETCH_*`) se
    reportan como `ConfigError`.
    """

    if config_file is None:
        try:
            return AppSettings()
        except ValueError as exc:
            sources = ", ".join(str(p) for p in (Path("config.toml"), get_user_config_file()) if p.is_file())
            raise ConfigError(f"invalid configuration ({sources or 'environment'}): {exc}") from exc
    if not config_file.is_file():
        raise ConfigError(f"config file not found: {config_file}")
    try:
        data = TomlConfigSettingsSource(AppSettings, toml_file=config_file)()
        return AppSettings(**data)
    except ValueError as exc:
        raise ConfigError(f"invalid config file {config_file}: {exc}") from exc
