from __future__ import annotations

from collections import Counter
from typing import Callable, Mapping

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from lovematch.models.profile import MatchNotification, ProfileRecord
from lovematch.services.profile import Profile
from lovematch.services.profile_store import PersistenceError
from lovematch.services.states import FlowState, Gender, MatchStep, Platform


def profile_from_record(record: ProfileRecord) -> Profile:
    return Profile(
        user_id=record.user_id,
        state=FlowState.from_tag(record.state),
        name=record.name,
        gender=Gender(record.gender) if record.gender else None,
        age=record.age,
        age_visible=bool(record.age_visible) if record.age_visible is not None else True,
        location=record.location,
        hobbies=list(record.hobbies or []),
        bio=record.bio,
        photo=record.photo,
        handle=record.handle,
        pending_handle=record.pending_handle,
        platform=Platform(record.platform) if record.platform else None,
        platform_label=record.platform_label,
        match_step=MatchStep(record.match_step) if record.match_step else None,
        match_location=record.match_location,
    )


def record_from_profile(profile: Profile) -> ProfileRecord:
    return ProfileRecord(
        user_id=profile.user_id,
        state=profile.state.tag,
        name=profile.name,
        gender=profile.gender.value if profile.gender else None,
        age=profile.age,
        age_visible=profile.age_visible,
        location=profile.location,
        hobbies=list(profile.hobbies),
        bio=profile.bio,
        photo=profile.photo,
        handle=profile.handle,
        pending_handle=profile.pending_handle,
        platform=profile.platform.value if profile.platform else None,
        platform_label=profile.platform_label,
        match_step=profile.match_step.value if profile.match_step else None,
        match_location=profile.match_location,
    )


def list_profiles(db: Session) -> list[Profile]:
    records = db.execute(select(ProfileRecord)).scalars().all()
    return [profile_from_record(r) for r in records]


def list_notifications(db: Session) -> dict[str, set[str]]:
    ledger: dict[str, set[str]] = {}
    for row in db.execute(select(MatchNotification)).scalars().all():
        ledger.setdefault(row.recipient_id, set()).add(row.source_id)
    return ledger


def replace_snapshot(
    db: Session,
    profiles: Mapping[str, Profile],
    ledger: Mapping[str, set[str]],
) -> None:
    db.execute(delete(ProfileRecord))
    db.execute(delete(MatchNotification))
    db.add_all(record_from_profile(p) for p in profiles.values())
    db.add_all(
        MatchNotification(recipient_id=recipient, source_id=source)
        for recipient, sources in ledger.items()
        for source in sorted(sources)
    )
    db.commit()


def profile_stats(db: Session) -> dict:
    profiles = list_profiles(db)
    by_state = Counter(p.state.mode.value for p in profiles)
    by_location = Counter(p.location for p in profiles if p.is_completed and p.location)
    notifications = db.scalar(select(func.count()).select_from(MatchNotification)) or 0
    return {
        "total": len(profiles),
        "by_state": dict(by_state),
        "completed_by_location": dict(by_location),
        "notifications_sent": notifications,
    }


class SqlProfilePersistence:
    """Snapshot persistence: every save rewrites both tables in one transaction."""

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        self._session_factory = session_factory

    def load_all(self) -> tuple[dict[str, Profile], dict[str, set[str]]]:
        with self._session_factory() as db:
            profiles = {p.user_id: p for p in list_profiles(db)}
            ledger = list_notifications(db)
        return profiles, ledger

    def save_all(self, profiles: Mapping[str, Profile], ledger: Mapping[str, set[str]]) -> None:
        with self._session_factory() as db:
            try:
                replace_snapshot(db, profiles, ledger)
            except SQLAlchemyError as exc:
                db.rollback()
                raise PersistenceError("failed to write profile snapshot") from exc
