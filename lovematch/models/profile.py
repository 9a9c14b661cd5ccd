from sqlalchemy import JSON, Boolean, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class ProfileRecord(Base):
    __tablename__ = "profiles"

    user_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    state: Mapped[str] = mapped_column(String(48), default="awaiting-name")

    name: Mapped[str | None] = mapped_column(String(120), nullable=True)
    gender: Mapped[str | None] = mapped_column(String(16), nullable=True)
    age: Mapped[int | None] = mapped_column(Integer, nullable=True)
    age_visible: Mapped[bool] = mapped_column(Boolean, default=True)
    location: Mapped[str | None] = mapped_column(String(120), nullable=True, index=True)
    hobbies: Mapped[list] = mapped_column(JSON, default=list)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    photo: Mapped[str | None] = mapped_column(String(255), nullable=True)

    handle: Mapped[str | None] = mapped_column(String(120), nullable=True)
    pending_handle: Mapped[str | None] = mapped_column(String(120), nullable=True)
    platform: Mapped[str | None] = mapped_column(String(16), nullable=True)
    platform_label: Mapped[str | None] = mapped_column(String(120), nullable=True)

    match_step: Mapped[str | None] = mapped_column(String(32), nullable=True)
    match_location: Mapped[str | None] = mapped_column(String(120), nullable=True)


class MatchNotification(Base):
    __tablename__ = "match_notifications"
    __table_args__ = (
        UniqueConstraint("recipient_id", "source_id", name="uq_match_notifications_pair"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    recipient_id: Mapped[str] = mapped_column(String(64), index=True)
    source_id: Mapped[str] = mapped_column(String(64))
