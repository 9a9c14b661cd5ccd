import asyncio

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from lovematch.bot.handlers.messages import (
    dispatch_button,
    dispatch_photo,
    dispatch_start,
    dispatch_text,
    run_dispatch,
)
from lovematch.bot.transport import Event, PhotoVariant
from lovematch.db import create_schema, get_db
from lovematch.main import create_app
from lovematch.services.profile_store import PersistenceError, ProfileStore


class MemoryPersistence:
    def __init__(self):
        self.profiles = {}
        self.ledger = {}
        self.saves = 0
        self.fail = False
        self.fail_ledger = False

    def load_all(self):
        return {k: v.copy() for k, v in self.profiles.items()}, {k: set(v) for k, v in self.ledger.items()}

    def save_all(self, profiles, ledger):
        if self.fail:
            raise PersistenceError("disk full")
        if self.fail_ledger and {k: set(v) for k, v in ledger.items()} != self.ledger:
            raise PersistenceError("ledger table locked")
        self.saves += 1
        self.profiles = {k: v.copy() for k, v in profiles.items()}
        self.ledger = {k: set(v) for k, v in ledger.items()}


class RecordingTransport:
    def __init__(self):
        self.replies = []
        self.images = []
        self.edits = []
        self.sent = []

    async def reply(self, text, options=None):
        self.replies.append((text, options))

    async def reply_with_image(self, reference, caption, options=None):
        self.images.append((reference, caption, options))

    async def edit_last_message(self, text=None, options=None):
        self.edits.append((text, options))

    def send_to(self, user_id, text):
        self.sent.append((user_id, text))

    @property
    def texts(self):
        return [text for text, _ in self.replies]

    @property
    def last_text(self):
        return self.replies[-1][0] if self.replies else None

    @property
    def last_options(self):
        return self.replies[-1][1] if self.replies else None


class BotDriver:
    """Feeds normalized events through the dispatcher, one transport per event."""

    def __init__(self, store):
        self.store = store

    def _run(self, dispatch, event):
        transport = RecordingTransport()
        asyncio.run(run_dispatch(dispatch, self.store, event, transport))
        return transport

    def start(self, user_id, handle=None):
        return self._run(dispatch_start, Event(user_id=user_id, text="/start", native_handle=handle))

    def text(self, user_id, text, handle=None):
        return self._run(dispatch_text, Event(user_id=user_id, text=text, native_handle=handle))

    def press(self, user_id, action, handle=None):
        return self._run(dispatch_button, Event(user_id=user_id, action=action, native_handle=handle))

    def photo(self, user_id, *variants, handle=None):
        return self._run(dispatch_photo, Event(user_id=user_id, photos=tuple(variants), native_handle=handle))

    def onboard(self, user_id, gender="male", location_index=0, age="25", handle="handle", age_visible=True):
        self.press(user_id, "signup")
        self.text(user_id, f"User {user_id}")
        self.press(user_id, f"gender:{gender}")
        self.text(user_id, age)
        self.press(user_id, "agevis:yes" if age_visible else "agevis:no")
        self.press(user_id, f"loc:{location_index}")
        self.press(user_id, "hobby:toggle:0")
        self.press(user_id, "hobby:done")
        self.text(user_id, "Likes long walks", handle=handle)
        if not handle:
            self.text(user_id, f"insta_{user_id}")
            self.press(user_id, "platform:instagram")
        return self.photo(user_id, PhotoVariant(f"photo-{user_id}", 640, 480), handle=handle)


@pytest.fixture()
def persistence():
    return MemoryPersistence()


@pytest.fixture()
def store(persistence):
    return ProfileStore.load(persistence)


@pytest.fixture()
def bot(store):
    return BotDriver(store)


@pytest.fixture()
def session_factory():
    engine = create_engine(
        "sqlite+pysqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_schema(engine)
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture()
def test_app(session_factory):
    app = create_app()

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    return app, session_factory


@pytest.fixture()
def client(test_app):
    app, _ = test_app
    return TestClient(app)
