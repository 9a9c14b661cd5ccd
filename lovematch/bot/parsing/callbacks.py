SIGNUP = "signup"
GENDER = "gender"
AGE_VISIBILITY = "agevis"
LOCATION = "loc"
HOBBY = "hobby"
PLATFORM = "platform"
EDIT = "edit"
MATCH_LOCATION = "match_loc"
REVEAL = "reveal"

OTHER = "other"
DONE = "done"
CANCEL = "cancel"
TOGGLE = "toggle"


def make_action(namespace: str, *parts: object) -> str:
    return ":".join([namespace, *(str(p) for p in parts)])


def parse_action(data: str | None) -> tuple[str, str]:
    """Split callback data into (namespace, argument); argument may be empty."""
    if not data:
        return "", ""
    namespace, _, arg = data.strip().partition(":")
    return namespace, arg


def parse_index(value: str, size: int) -> int | None:
    if not value.isdigit():
        return None
    index = int(value)
    if index >= size:
        return None
    return index
