from __future__ import annotations

import logging
from typing import Callable

from lovematch.i18n.core import t
from lovematch.services.profile import Profile
from lovematch.services.profile_store import PersistenceError, ProfileStore
from lovematch.services.validation import validate_age

logger = logging.getLogger("lovematch_bot")

SendFunc = Callable[[str, str], None]


def should_alert(waiting: Profile, new_profile: Profile) -> bool:
    return (
        waiting.user_id != new_profile.user_id
        and waiting.is_completed
        and waiting.gender is not None
        and waiting.gender != new_profile.gender
        and validate_age(waiting.age)
        and validate_age(new_profile.age)
    )


def notify_new_profile(store: ProfileStore, new_profile: Profile, send: SendFunc, locale: str = "en") -> list[str]:
    """Alert compatible completed profiles about ``new_profile``.

    The ledger entry is written before the alert goes out, and an existing
    entry suppresses the alert, so repeated calls for the same profile never
    alert anyone twice. A recipient whose entry cannot be written is skipped
    and the rest are still processed. ``send`` must not block; returns the
    alerted ids.
    """
    alerted = []
    for waiting in store.all():
        if not should_alert(waiting, new_profile):
            continue
        try:
            recorded = store.record_notification(waiting.user_id, new_profile.user_id)
        except PersistenceError:
            logger.exception(
                "Could not record alert of %s for %s", new_profile.user_id, waiting.user_id
            )
            continue
        if not recorded:
            continue
        send(waiting.user_id, t("notify.new_match", locale=locale))
        alerted.append(waiting.user_id)
    if alerted:
        logger.info("New profile %s announced to %s users", new_profile.user_id, len(alerted))
    return alerted
