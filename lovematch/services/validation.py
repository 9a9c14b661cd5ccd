from __future__ import annotations

import re

MIN_AGE = 16
MAX_AGE = 45

_INT_RE = re.compile(r"\b(\d{1,4})\b")


def validate_string(value: object) -> bool:
    return isinstance(value, str) and len(value.strip()) > 1


def validate_age(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return MIN_AGE <= value <= MAX_AGE


def parse_age(text: str) -> int | None:
    """First standalone number in ``text`` when it is an allowed age."""
    m = _INT_RE.search(text)
    if not m:
        return None
    age = int(m.group(1))
    if not validate_age(age):
        return None
    return age
