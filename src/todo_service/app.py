"""Application assembly.

Builds the pico-ioc container that owns the configuration and the store,
and wires the HTTP router onto a FastAPI application.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from pico_ioc import init
from pico_ioc.config_builder import ContextConfig, EnvSource, configuration
from pico_ioc.container import PicoContainer

from .api import malformed_body_handler, router
from .config import TodoConfig
from .constants import LOGGER
from .store import TodoStore

COMPONENT_MODULES = (
    "todo_service.config",
    "todo_service.store",
)


def build_container(config: Optional[ContextConfig] = None) -> PicoContainer:
    """Create a container holding one :class:`TodoConfig` and one :class:`TodoStore`.

    Args:
        config: Configuration sources. Defaults to the process environment.

    Returns:
        The initialised container.

    Raises:
        ConfigurationError: If the resolved settings are invalid.
    """
    container = init(
        modules=list(COMPONENT_MODULES),
        config=config if config is not None else configuration(EnvSource()),
    )
    container.get(TodoConfig).validate()
    return container


def create_app(config: Optional[ContextConfig] = None, *, container: Optional[PicoContainer] = None) -> FastAPI:
    """Build the FastAPI application serving the todo API.

    Args:
        config: Configuration sources, used only when ``container`` is not given.
        container: A pre-built container; its store becomes the app's store.

    Returns:
        A FastAPI app whose lifespan shuts the container down on exit.
    """
    if container is None:
        container = build_container(config)
    settings = container.get(TodoConfig)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        container.shutdown()

    app = FastAPI(title=settings.app_title, lifespan=lifespan)
    app.state.container = container
    app.include_router(router, prefix=settings.api_prefix)
    app.add_exception_handler(RequestValidationError, malformed_body_handler)

    store = container.get(TodoStore)
    LOGGER.info("Todo API ready under %s with %d todos", settings.api_prefix, len(store))
    return app
