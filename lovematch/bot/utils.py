from typing import Any

from lovematch.i18n.core import t
from lovematch.settings import settings


def msg(key: str, **vars: Any) -> str:
    return t(key, locale=settings.BOT_LOCALE, **vars)
