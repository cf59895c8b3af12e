"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError          (application.py)
    │   └── ConfigError
    │       ├── MissingRequiredSettingError
    │       ├── InvalidSettingValueError
    │       └── LoggerNotInitializedError
    └── InfrastructureError       (infrastructure.py)
        └── TransportError
            └── TransportDispatchError
"""

from clientlog.kernel.errors.application import (
    ApplicationError,
    ConfigError,
    InvalidSettingValueError,
    LoggerNotInitializedError,
    MissingRequiredSettingError,
)
from clientlog.kernel.errors.base import BaseError
from clientlog.kernel.errors.infrastructure import (
    InfrastructureError,
    TransportDispatchError,
    TransportError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConfigError",
    "InfrastructureError",
    "InvalidSettingValueError",
    "LoggerNotInitializedError",
    "MissingRequiredSettingError",
    "TransportDispatchError",
    "TransportError",
]
