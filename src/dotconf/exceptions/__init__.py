"""Common exceptions for dotconf.

Usage:
    from dotconf.exceptions import (
        DotconfError,
        ConfigurationError,
        BindingResolutionError,
    )

The repository and the .env loader never raise these for missing files or
malformed input; they are reserved for container and path-resolution misuse.
"""

from dotconf.exceptions.base import (
    BindingResolutionError,
    ConfigurationError,
    DotconfError,
)

__all__ = [
    "DotconfError",
    "ConfigurationError",
    "BindingResolutionError",
]
