"""dotconf - configuration loading for applications.

This package provides:
- config: dot-notation configuration repository, .env loader, service provider
- container / application: minimal dependency container and provider lifecycle
- logger: structured logging with optional JSON output
- exceptions: exception classes with structured error info
"""

__version__ = "1.0.0"

from dotconf.logger import (
    Logger,
    StructuredLogger,
    get_logger,
    create_logger,
)

from dotconf.exceptions import (
    DotconfError,
    ConfigurationError,
    BindingResolutionError,
)

from dotconf.container import Container
from dotconf.paths import PathResolver
from dotconf.provider import ServiceProvider
from dotconf.application import Application

from dotconf.config import (
    ConfigRepository,
    ConfigServiceProvider,
    EnvLoader,
    LoaderSettings,
    env,
)

__all__ = [
    "__version__",
    # Logger
    "Logger",
    "StructuredLogger",
    "get_logger",
    "create_logger",
    # Exceptions
    "DotconfError",
    "ConfigurationError",
    "BindingResolutionError",
    # Container
    "Container",
    "PathResolver",
    "ServiceProvider",
    "Application",
    # Config
    "ConfigRepository",
    "ConfigServiceProvider",
    "EnvLoader",
    "LoaderSettings",
    "env",
]
