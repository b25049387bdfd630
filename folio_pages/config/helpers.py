"""Utility helpers shared by the folio configuration loader."""

from __future__ import annotations

from .models import SiteConfigError

TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_bool(value: object, *, key: str) -> bool:
    """Interpret booleans written as YAML booleans or common strings."""
    match value:
        case bool():
            return value
        case int():
            return value != 0
        case str() as text:
            normalized = text.strip().lower()
            if normalized in TRUE_VALUES:
                return True
            if normalized in FALSE_VALUES:
                return False
        case _:
            pass
    msg = f"Setting '{key}' must be a boolean, got {value!r}."
    raise SiteConfigError(msg)


def _parse_port(value: object) -> int:
    """Return ``value`` as a TCP port number."""
    try:
        port = int(str(value).strip())
    except ValueError as exc:
        msg = f"Setting 'port' must be an integer, got {value!r}."
        raise SiteConfigError(msg) from exc
    if not 0 <= port <= 65535:
        msg = f"Setting 'port' is out of range: {port}."
        raise SiteConfigError(msg)
    return port


__all__ = ["FALSE_VALUES", "TRUE_VALUES", "_optional_str", "_parse_bool", "_parse_port"]
