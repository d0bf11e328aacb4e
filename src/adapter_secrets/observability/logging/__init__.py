"""Observability – structured logging helpers."""
from adapter_secrets.observability.logging.filters import SensitiveFieldsFilter
from adapter_secrets.observability.logging.factory import JsonLoggerFactory
from adapter_secrets.observability.logging.processors import get_logger

__all__ = ["JsonLoggerFactory", "SensitiveFieldsFilter", "get_logger"]
