import os

from pydantic import BaseModel

DEFAULT_INTERFACE_NAME = "ITelemetryLogger"
DEFAULT_LOG_LEVEL = "INFO"


class Settings(BaseModel):
    interface_name: str = DEFAULT_INTERFACE_NAME
    log_level: str = DEFAULT_LOG_LEVEL


def get_settings(interface_name: str | None = None, log_level: str | None = None) -> Settings:
    """Build settings from the environment; explicit arguments take precedence."""
    return Settings(
        interface_name=interface_name or os.getenv("CODEX_LSP_INTERFACE_NAME", DEFAULT_INTERFACE_NAME),
        log_level=(log_level or os.getenv("CODEX_LSP_LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper(),
    )
