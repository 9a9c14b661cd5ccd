"""In-memory profile table with synchronous flush-on-write.

Every ``upsert`` hands the whole table to the persistence collaborator before
the in-memory table is swapped, so a failed write leaves memory untouched and
surfaces as ``PersistenceError``. ``get`` and ``all`` return copies: callers
mutate their copy and publish it with ``upsert``.

The store also owns the notification ledger, the relation recipient id ->
ids of newly completed profiles the recipient has already been alerted about.
"""

from __future__ import annotations

import logging
from typing import Mapping, Protocol

from lovematch.services.profile import Profile

logger = logging.getLogger("lovematch_bot")


class PersistenceError(RuntimeError):
    pass


class ProfilePersistence(Protocol):
    def load_all(self) -> tuple[dict[str, Profile], dict[str, set[str]]]: ...

    def save_all(self, profiles: Mapping[str, Profile], ledger: Mapping[str, set[str]]) -> None: ...


class ProfileStore:
    def __init__(
        self,
        persistence: ProfilePersistence,
        profiles: dict[str, Profile] | None = None,
        ledger: dict[str, set[str]] | None = None,
    ) -> None:
        self._persistence = persistence
        self._profiles: dict[str, Profile] = profiles or {}
        self._ledger: dict[str, frozenset[str]] = {
            key: frozenset(value) for key, value in (ledger or {}).items()
        }

    @classmethod
    def load(cls, persistence: ProfilePersistence) -> "ProfileStore":
        profiles, ledger = persistence.load_all()
        logger.info("Loaded %s profiles", len(profiles))
        return cls(persistence, profiles, ledger)

    def get(self, user_id: str) -> Profile | None:
        profile = self._profiles.get(str(user_id))
        return profile.copy() if profile is not None else None

    def all(self) -> list[Profile]:
        return [profile.copy() for profile in self._profiles.values()]

    def upsert(self, profile: Profile) -> None:
        profiles = dict(self._profiles)
        profiles[profile.user_id] = profile.copy()
        self._flush(profiles, self._ledger)
        self._profiles = profiles

    def notified(self, recipient_id: str) -> frozenset[str]:
        return self._ledger.get(str(recipient_id), frozenset())

    def record_notification(self, recipient_id: str, source_id: str) -> bool:
        """Add ``source_id`` to the recipient's ledger; False if already there."""
        recipient_id, source_id = str(recipient_id), str(source_id)
        if recipient_id == source_id:
            raise ValueError("a profile is never notified about itself")
        current = self.notified(recipient_id)
        if source_id in current:
            return False
        ledger = dict(self._ledger)
        ledger[recipient_id] = current | {source_id}
        self._flush(self._profiles, ledger)
        self._ledger = ledger
        return True

    def _flush(self, profiles: Mapping[str, Profile], ledger: Mapping[str, frozenset[str]]) -> None:
        self._persistence.save_all(profiles, {key: set(value) for key, value in ledger.items()})

    def __len__(self) -> int:
        return len(self._profiles)

    def __contains__(self, user_id: object) -> bool:
        return str(user_id) in self._profiles
