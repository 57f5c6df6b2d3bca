"""
Message catalog for log lines and CLI output.

Catalogs are plain JSON files under resources/i18n/:
1. Shared files in the i18n root (logs.json), identical for every locale
2. Per-locale files in resources/i18n/{locale}/ (cli.json, fields.json)

English is always loaded as the fallback layer underneath the active locale.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

__all__ = ["I18n", "available_locales", "init_i18n", "t"]

logger = logging.getLogger("screamid.i18n")

FALLBACK_LOCALE = "en"


def _merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``update`` into a copy of ``base``."""
    result = base.copy()
    for key, value in update.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = _merge(result[key], value)
        else:
            result[key] = value
    return result


def _read_catalog_dir(directory: Path) -> dict[str, Any]:
    """Read and merge every ``*.json`` file directly inside ``directory``.

    Files that cannot be read or decoded are logged and skipped.
    """
    merged: dict[str, Any] = {}
    if not directory.is_dir():
        return merged

    for file_path in sorted(directory.glob("*.json")):
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                merged = _merge(merged, json.load(f))
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Error loading i18n file %s: %s", file_path.name, e)
    return merged


def _i18n_root() -> Path:
    from scream_id.utils.paths import get_resources_dir

    return get_resources_dir() / "i18n"


def available_locales() -> list[str]:
    """Return the locale codes that ship a catalog directory, sorted."""
    root = _i18n_root()
    if not root.is_dir():
        return []
    return sorted(p.name for p in root.iterdir() if p.is_dir())


class I18n:
    """A loaded message catalog for one locale."""

    def __init__(self, locale: str = FALLBACK_LOCALE, root: Path | None = None) -> None:
        """Load the catalog for ``locale``.

        Args:
            locale: Locale code, the name of a directory in resources/i18n/.
            root: Catalog root, defaults to the packaged resources/i18n/.
        """
        self.locale = locale
        self.root = root if root is not None else _i18n_root()
        self.messages: dict[str, Any] = {}
        self._load()

    def _load(self) -> None:
        shared = _read_catalog_dir(self.root)
        fallback = _merge(shared, _read_catalog_dir(self.root / FALLBACK_LOCALE))

        if self.locale == FALLBACK_LOCALE:
            self.messages = fallback
            return

        locale_dir = self.root / self.locale
        if not locale_dir.is_dir():
            logger.warning("Unknown locale '%s', falling back to '%s'", self.locale, FALLBACK_LOCALE)
        self.messages = _merge(fallback, _read_catalog_dir(locale_dir))

    def t(self, key: str, **kwargs: Any) -> str:
        """Look up a message by dot-notation key and format it.

        Args:
            key: Dot-separated key path (e.g. 'cli.usage').
            **kwargs: Values for ``str.format`` placeholders.

        Returns:
            The formatted message, or '[key]' if the key is missing. A message
            whose placeholders do not match ``kwargs`` is returned unformatted.
        """
        node: Any = self.messages
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return f"[{key}]"
            node = node[part]

        if not isinstance(node, str):
            return f"[{key}]"

        if not kwargs:
            return node
        try:
            return node.format(**kwargs)
        except (ValueError, KeyError, IndexError):
            return node


_i18n_instance: I18n | None = None


def init_i18n(locale: str = FALLBACK_LOCALE) -> I18n:
    """(Re)initialize the global catalog for ``locale`` and return it."""
    global _i18n_instance
    _i18n_instance = I18n(locale)
    return _i18n_instance


def t(key: str, **kwargs: Any) -> str:
    """Look up a message in the global catalog. See I18n.t."""
    if _i18n_instance is None:
        init_i18n()
    return _i18n_instance.t(key, **kwargs)
