"""Utility helpers shared by the docs site configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from docs_site._constants import DEFAULT_INTERNAL_PREFIXES

from .models import SiteConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _coerce_bool(value: object, *, key: str) -> bool:
    """Interpret YAML booleans and common string spellings as a bool."""
    match value:
        case bool():
            return value
        case None:
            return False
        case str() as text if text.strip().lower() in {"1", "true", "yes", "on"}:
            return True
        case str() as text if text.strip().lower() in {"0", "false", "no", "off", ""}:
            return False
        case _:
            msg = f"'{key}' must be a boolean, got {value!r}."
            raise SiteConfigError(msg)


def _build_versions(payload: object) -> dict[str, str]:
    """Normalize the ``versions`` block into a key -> label mapping.

    Accepts either a mapping (``{"3.0": "3.0 (stable)"}``) or a plain list of
    keys, in which case each label equals its key. Keys are stringified so
    unquoted YAML numbers such as ``3.0`` survive as ``"3.0"``.
    """
    match payload:
        case None:
            return {}
        case dict():
            versions: dict[str, str] = {}
            for key, label in payload.items():
                token = _optional_str(key)
                if token is None:
                    continue
                versions[token] = _optional_str(label) or token
            return versions
        case list():
            return {
                token: token
                for token in (_optional_str(item) for item in payload)
                if token is not None
            }
        case _:
            msg = "'versions' must be a mapping or a list of version keys."
            raise SiteConfigError(msg)


def _build_internal_prefixes(payload: object) -> tuple[str, ...]:
    """Return the configured internal route markers or the defaults."""
    if payload is None:
        return DEFAULT_INTERNAL_PREFIXES
    if isinstance(payload, str):
        payload = [payload]
    if not isinstance(payload, list):
        msg = "'internal_prefixes' must be a list of path segments."
        raise SiteConfigError(msg)
    prefixes: list[str] = []
    for item in payload:
        text = _optional_str(item)
        if text:
            prefixes.append(text.strip("/"))
    return tuple(prefixes)


def _resolve_source_dir(value: object, base_dir: Path) -> Path:
    """Resolve ``source_dir`` relative to the directory holding the config."""
    text = _optional_str(value) or "source"
    path = Path(text).expanduser()
    if not path.is_absolute():
        path = base_dir / path
    return path


def _default_start_page(default_version: str) -> str:
    """Return the home redirect target used when none is configured."""
    return f"/{default_version}/"


def _lookup(raw: typ.Mapping[str, typ.Any], key: str) -> typ.Any:
    """Return ``raw[key]``, accepting the hyphenated spelling as well."""
    if key in raw:
        return raw[key]
    return raw.get(key.replace("_", "-"))


__all__ = [
    "_build_internal_prefixes",
    "_build_versions",
    "_coerce_bool",
    "_default_start_page",
    "_lookup",
    "_optional_str",
    "_resolve_source_dir",
]
