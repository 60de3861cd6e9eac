from dataclasses import dataclass
import logging
import os

from emulated_devices.errors import ConfigError

DEVICE_DESCRIPTORS_URL = (
    "https://raw.githubusercontent.com/puppeteer/puppeteer/main/src/common/DeviceDescriptors.ts"
)


@dataclass(frozen=True)
class Settings:
    timeout_s: int
    log_level: str


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name, "")
    if not value:
        return default
    try:
        number = int(value)
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from e
    if number <= 0:
        raise ConfigError(f"{name} must be positive, got {number}")
    return number


def _env_log_level(name: str, default: str) -> str:
    value = os.getenv(name, "") or default
    level = value.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"{name} is not a logging level: {value!r}")
    return level


def load_settings() -> Settings:
    return Settings(
        timeout_s=_env_int("DEVICEGEN_HTTP_TIMEOUT", 60),
        log_level=_env_log_level("DEVICEGEN_LOG_LEVEL", "INFO"),
    )
