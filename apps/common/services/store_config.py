from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from django.conf import settings

from apps.common.models import StoreConfig

logger = logging.getLogger(__name__)


_FALSY_STRINGS = {"", "0", "false", "no", "off"}
_MISSING = object()


def to_bool(value: Any) -> bool:
    """Coerce a stored config value to bool.

    Config values are persisted as text, so "0" / "false" must be False.
    """
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip().lower() not in _FALSY_STRINGS
    return bool(value)


def to_decimal(value: Any) -> Decimal:
    """Coerce a stored config value to Decimal. Blank, unparsable or non-finite -> 0."""
    if value is None:
        return Decimal("0")
    if isinstance(value, bool):
        return Decimal(int(value))
    if isinstance(value, Decimal):
        amount = value
    else:
        raw = str(value).strip()
        if not raw:
            return Decimal("0")
        try:
            amount = Decimal(raw)
        except (InvalidOperation, ValueError):
            logger.warning("Valor de configuración no numérico: %r", value)
            return Decimal("0")
    if not amount.is_finite():
        logger.warning("Valor de configuración no finito: %r", value)
        return Decimal("0")
    return amount


class ConfigProvider(ABC):
    """Scoped configuration lookup by key path (``section/group/field``).

    Implementations must never raise for unknown paths; they return ``None``.
    """

    @abstractmethod
    def get_value(self, path: str) -> Any:
        ...

    def is_set_flag(self, path: str) -> bool:
        return to_bool(self.get_value(path))

    def get_decimal(self, path: str) -> Decimal:
        return to_decimal(self.get_value(path))


class DatabaseConfigProvider(ConfigProvider):
    """Resolve values from ``StoreConfig`` rows.

    Resolution order:
    1) scope "store" for ``store_code``
    2) scope "default"
    3) ``settings.STORE_CONFIG_DEFAULTS``
    4) None
    """

    def __init__(self, store_code: Optional[str] = None):
        if store_code is None:
            store_code = getattr(settings, "STORE_CODE", "") or ""
        self.store_code = store_code

    def get_value(self, path: str) -> Any:
        rows = StoreConfig.objects.filter(path=path).values_list("scope", "scope_code", "value")

        default_value = _MISSING
        for scope, scope_code, value in rows:
            if scope == StoreConfig.Scope.STORE and self.store_code and scope_code == self.store_code:
                return value
            if scope == StoreConfig.Scope.DEFAULT:
                default_value = value

        if default_value is not _MISSING:
            return default_value

        defaults = getattr(settings, "STORE_CONFIG_DEFAULTS", {}) or {}
        return defaults.get(path)


def set_config_value(path: str, value: Optional[str], *, scope: str = StoreConfig.Scope.DEFAULT, scope_code: str = "") -> StoreConfig:
    """Create or update a config row (used by admin tooling and the ``config_set`` command)."""
    if scope == StoreConfig.Scope.DEFAULT:
        scope_code = ""

    obj, created = StoreConfig.objects.update_or_create(
        path=path,
        scope=scope,
        scope_code=scope_code,
        defaults={"value": value},
    )
    logger.info(
        "Config %s: %s",
        "creada" if created else "actualizada",
        path,
        extra={"path": path, "scope": scope, "scope_code": scope_code},
    )
    return obj


def delete_config_value(path: str, *, scope: str = StoreConfig.Scope.DEFAULT, scope_code: str = "") -> int:
    if scope == StoreConfig.Scope.DEFAULT:
        scope_code = ""
    deleted, _ = StoreConfig.objects.filter(path=path, scope=scope, scope_code=scope_code).delete()
    return deleted
