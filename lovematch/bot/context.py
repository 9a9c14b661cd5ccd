from __future__ import annotations

from sqlalchemy.orm import sessionmaker
from telegram.ext import ContextTypes

from lovematch.crud import SqlProfilePersistence
from lovematch.db import SessionLocal
from lovematch.services.profile_store import ProfileStore

STORE_KEY = "profile_store"


def build_store(session_factory: sessionmaker = SessionLocal) -> ProfileStore:
    return ProfileStore.load(SqlProfilePersistence(session_factory))


def get_store(context: ContextTypes.DEFAULT_TYPE) -> ProfileStore:
    return context.bot_data[STORE_KEY]
