"""Configuration loaded from environment variables and an optional .env file."""
import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from dotenv import load_dotenv

from .element import DEFAULT_PRESET, Element, get_preset
from .errors import ConfigurationError
from .sources import DISCARD_LIMIT

# Load environment variables from .env file if it exists
load_dotenv()


def _get_int(env: Mapping[str, str], key: str, default: Optional[int]) -> Optional[int]:
    raw = env.get(key, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{key} must be a whole number, got '{raw}'") from None
    if value < 0:
        raise ConfigurationError(f"{key} cannot be negative, got {value}")
    return value


def _get_element(env: Mapping[str, str]) -> Element:
    kind = env.get("ELEMENT_KIND", "").strip()
    if not kind:
        return get_preset(env.get("ELEMENT_PRESET", DEFAULT_PRESET))
    missing = [key for key in ("ELEMENT_LOW", "ELEMENT_HIGH") if key not in env]
    if missing:
        raise ConfigurationError(f"ELEMENT_KIND is set but {', '.join(missing)} is missing")
    return Element.from_strings(
        kind,
        env.get("ELEMENT_NAME", "").strip(),
        env["ELEMENT_LOW"].strip(),
        env["ELEMENT_HIGH"].strip(),
    )


@dataclass
class Config:
    """Runtime settings for the readers and the demonstration."""

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_DIR: Optional[str] = "logs"

    # Reader behaviour
    DISCARD_LIMIT: int = DISCARD_LIMIT
    MAX_RETRIES: Optional[int] = None

    # Demo element type
    ELEMENT: Element = field(default_factory=lambda: get_preset(DEFAULT_PRESET))

    def __post_init__(self):
        self.LOG_LEVEL = self.LOG_LEVEL.strip().upper()
        if not isinstance(logging.getLevelName(self.LOG_LEVEL), int):
            raise ConfigurationError(f"Unknown LOG_LEVEL '{self.LOG_LEVEL}'")

    @property
    def log_level(self) -> int:
        return logging.getLevelName(self.LOG_LEVEL)

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Config":
        """
        Build a configuration from environment variables.

        Args:
            env: Mapping to read instead of os.environ

        Raises:
            ConfigurationError: If a setting is present but unusable
        """
        if env is None:
            env = os.environ

        log_dir = env.get("LOG_DIR", cls.LOG_DIR).strip() or None

        return cls(
            LOG_LEVEL=env.get("LOG_LEVEL", cls.LOG_LEVEL),
            LOG_DIR=log_dir,
            DISCARD_LIMIT=_get_int(env, "DISCARD_LIMIT", DISCARD_LIMIT),
            MAX_RETRIES=_get_int(env, "MAX_RETRIES", None),
            ELEMENT=_get_element(env),
        )
