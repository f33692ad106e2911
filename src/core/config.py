"""Settings read from the environment (or a .env file)"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.render.assets import DEFAULT_ASSET_DIR

DEFAULT_BIND = ":8080"
DEFAULT_HOST = "0.0.0.0"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "FEN Board Renderer"
    app_version: str = "1.0.0"

    # Listen address in "host:port" form. An empty host (":8080") means all interfaces.
    bind: str = Field(default=DEFAULT_BIND)

    asset_dir: Path = Field(default=DEFAULT_ASSET_DIR)

    # Names understood by both logging and uvicorn
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = Field(
        default="INFO"
    )
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @field_validator("bind")
    @classmethod
    def validate_bind(cls, value: str) -> str:
        parse_bind(value)
        return value

    @property
    def bind_address(self) -> tuple[str, int]:
        return parse_bind(self.bind)


def parse_bind(bind: str) -> tuple[str, int]:
    """Split 'host:port' (or '[ipv6]:port') into its parts"""
    host, separator, port = bind.strip().rpartition(":")
    if not separator or not port.isdigit():
        raise ValueError(f"Bind address must look like 'host:port', got {bind!r}")

    port_number = int(port)
    # port 0 lets the OS pick a free port
    if not (0 <= port_number < 65536):
        raise ValueError(f"Port out of range: {port_number}")

    host = host.removeprefix("[").removesuffix("]")
    return (host or DEFAULT_HOST, port_number)


def get_settings() -> Settings:
    return Settings()
