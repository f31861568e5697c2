import logging
from dataclasses import dataclass

from pico_ioc import configured

from .constants import CONFIG_PREFIX, DEFAULT_PORT
from .exceptions import ConfigurationError


@configured(prefix=CONFIG_PREFIX)
@dataclass
class TodoConfig:
    """Runtime settings, read from ``TODO_*`` keys of the flat config sources."""

    bind_host: str = "0.0.0.0"
    bind_port: int = DEFAULT_PORT
    api_prefix: str = "/api"
    seed_demo: bool = True
    log_level: str = "INFO"
    app_title: str = "TODO API"

    def validate(self) -> None:
        if not 0 < self.bind_port < 65536:
            raise ConfigurationError(f"{CONFIG_PREFIX}BIND_PORT must be in 1..65535, got {self.bind_port}")
        if not self.api_prefix.startswith("/") or self.api_prefix.endswith("/"):
            raise ConfigurationError(
                f"{CONFIG_PREFIX}API_PREFIX must start with '/' and not end with it, got {self.api_prefix!r}"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigurationError(f"Unknown {CONFIG_PREFIX}LOG_LEVEL: {self.log_level!r}")
