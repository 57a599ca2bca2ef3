"""Environment-driven configuration objects for the storefront."""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from app.core.constants import WHATSAPP_HOST, WHATSAPP_NUMBER
from app.core.exceptions import ConfigurationException
from app.core.i18n import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES

ROOT_DIR = Path(__file__).resolve().parents[2]


def _str_to_bool(value: str | None) -> bool:
    if value is None:
        return False
    return value.strip().lower() in {"true", "1", "yes", "y", "on"}


@dataclass(slots=True)
class ServerConfig:
    host: str
    port: int


@dataclass(slots=True)
class Settings:
    whatsapp_number: str
    whatsapp_host: str
    default_language: str
    catalog_path: Path
    strict_sizes: bool
    server: ServerConfig


def load_settings() -> Settings:
    """Load environment variables once and expose typed settings."""
    load_dotenv()

    whatsapp_number = os.getenv("WHATSAPP_NUMBER", WHATSAPP_NUMBER).strip().lstrip("+")
    if not whatsapp_number.isdigit():
        raise ConfigurationException(
            f"WHATSAPP_NUMBER must contain digits only, got {whatsapp_number!r}"
        )

    default_language = os.getenv("DEFAULT_LANGUAGE", DEFAULT_LANGUAGE).strip().lower()
    if default_language not in SUPPORTED_LANGUAGES:
        raise ConfigurationException(
            f"DEFAULT_LANGUAGE must be one of {', '.join(SUPPORTED_LANGUAGES)}, "
            f"got {default_language!r}"
        )

    catalog_path = Path(os.getenv("CATALOG_PATH", str(ROOT_DIR / "data" / "catalog.json")))

    try:
        port = int(os.getenv("PORT", "8080"))
    except ValueError as e:
        raise ConfigurationException(f"PORT must be an integer: {e}") from e

    return Settings(
        whatsapp_number=whatsapp_number,
        whatsapp_host=os.getenv("WHATSAPP_HOST", WHATSAPP_HOST).strip() or WHATSAPP_HOST,
        default_language=default_language,
        catalog_path=catalog_path,
        strict_sizes=_str_to_bool(os.getenv("STRICT_SIZES")),
        server=ServerConfig(
            host=os.getenv("HOST", "0.0.0.0"),
            port=port,
        ),
    )
