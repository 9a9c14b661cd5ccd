from __future__ import annotations

from lovematch.services.profile import Profile
from lovematch.services.profile_store import ProfileStore
from lovematch.services.validation import validate_age


def is_match(requester: Profile, candidate: Profile, location: str) -> bool:
    return (
        candidate.is_completed
        and candidate.gender is not None
        and candidate.gender != requester.gender
        and validate_age(candidate.age)
        and candidate.location == location
    )


def find_matches(store: ProfileStore, requester: Profile, location: str) -> list[Profile]:
    return [p for p in store.all() if is_match(requester, p, location)]
