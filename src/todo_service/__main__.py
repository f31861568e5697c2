import argparse
import sys
from typing import List, Optional

import uvicorn
from pico_ioc.config_builder import EnvSource, configuration
from pico_ioc.exceptions import PicoError

from .app import build_container, create_app
from .config import TodoConfig
from .constants import CONFIG_PREFIX, LOGGER
from .exceptions import ConfigurationError
from .logging_setup import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todo-service",
        description="Serve the in-memory todo API.",
    )
    parser.add_argument("--host", default=None, help=f"Bind address (env {CONFIG_PREFIX}BIND_HOST)")
    parser.add_argument("--port", type=int, default=None, help=f"Bind port (env {CONFIG_PREFIX}BIND_PORT)")
    parser.add_argument("--log-level", default=None, help=f"Log level (env {CONFIG_PREFIX}LOG_LEVEL)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.host is not None:
        overrides[CONFIG_PREFIX + "BIND_HOST"] = args.host
    if args.port is not None:
        overrides[CONFIG_PREFIX + "BIND_PORT"] = args.port
    if args.log_level is not None:
        overrides[CONFIG_PREFIX + "LOG_LEVEL"] = args.log_level

    try:
        container = build_container(configuration(EnvSource(), overrides=overrides))
    except (ConfigurationError, PicoError) as e:
        print(f"todo-service: {e}", file=sys.stderr)
        return 2

    settings = container.get(TodoConfig)
    configure_logging(settings.log_level)
    app = create_app(container=container)
    LOGGER.info("Listening on %s:%d", settings.bind_host, settings.bind_port)
    uvicorn.run(app, host=settings.bind_host, port=settings.bind_port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
