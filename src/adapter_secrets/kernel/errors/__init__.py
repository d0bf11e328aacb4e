"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   ├── NotFoundError
    │   └── ConflictError
    └── ApplicationError     (application.py)
"""

from adapter_secrets.kernel.errors.application import ApplicationError
from adapter_secrets.kernel.errors.base import BaseError
from adapter_secrets.kernel.errors.domain import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "DomainError",
    "NotFoundError",
    "ValidationError",
]
