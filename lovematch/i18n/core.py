from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path

CATALOG_DIR = Path(__file__).resolve().parent
FALLBACK_LOCALE = "en"


class _KeepPlaceholders(dict):
    def __missing__(self, name: str) -> str:
        return "{" + name + "}"


@lru_cache(maxsize=None)
def catalog(locale: str) -> dict[str, str]:
    """Message templates for ``locale``; empty when no catalog ships for it."""
    path = CATALOG_DIR / f"{locale}.json"
    if not path.is_file():
        return {}
    return json.loads(path.read_text(encoding="utf-8"))


def t(key: str, locale: str = FALLBACK_LOCALE, **vars: object) -> str:
    template = catalog(locale).get(key) or catalog(FALLBACK_LOCALE).get(key, key)
    return template.format_map(_KeepPlaceholders(vars))
