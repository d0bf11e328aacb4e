"""Config settings – EnvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
import typing
from typing import Any, TypeVar

from adapter_secrets.config.settings.base import Settings
from adapter_secrets.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

T = TypeVar("T", bound=Settings)


class SettingsLoader(abc.ABC):
    """Port: load settings from an external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from OS environment variables.

    Field ``url`` of a class with ``_prefix = "VAULT"`` is read from ``VAULT_URL``.
    """

    def __init__(self, environ: typing.Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        prefix = getattr(settings_class, "_prefix", "").upper()
        hints = typing.get_type_hints(settings_class)
        kwargs: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            env_key = f"{prefix}_{field.name}".upper().lstrip("_")
            raw = environ.get(env_key)

            if raw is None:
                if (
                    field.default is dataclasses.MISSING
                    and field.default_factory is dataclasses.MISSING  # type: ignore[misc]
                ):
                    raise MissingRequiredSettingError(env_key)
                continue

            type_hint = hints.get(field.name, str)
            try:
                kwargs[field.name] = self._coerce(raw, type_hint)
            except ValueError:
                # int() messages quote the raw value
                raise InvalidSettingValueError(env_key, f"is not a valid {_type_name(type_hint)}") from None

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to load {settings_class.__name__}", cause=exc) from exc

    def _coerce(self, value: str, type_hint: Any) -> Any:
        type_hint = _unwrap_optional(type_hint)
        if type_hint is bool:
            return value.lower() in ("1", "true", "yes", "on")
        if type_hint is int:
            return int(value)
        return value


def _unwrap_optional(type_hint: Any) -> Any:
    # ``int | None`` and friends coerce to their first non-None member.
    args = [a for a in typing.get_args(type_hint) if a is not type(None)]
    return args[0] if args else type_hint


def _type_name(type_hint: Any) -> str:
    type_hint = _unwrap_optional(type_hint)
    return getattr(type_hint, "__name__", str(type_hint))


__all__ = ["EnvSettingsLoader", "SettingsLoader"]
