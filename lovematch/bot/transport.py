from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from telegram import Update
from telegram.error import TelegramError
from telegram.ext import ContextTypes

from lovematch.bot.rendering.keyboard import Options, to_markup

logger = logging.getLogger("lovematch_bot")


@dataclass(frozen=True)
class PhotoVariant:
    reference: str
    width: int = 0
    height: int = 0

    @property
    def area(self) -> int:
        return self.width * self.height


@dataclass(frozen=True)
class Event:
    user_id: str
    text: str | None = None
    photos: tuple[PhotoVariant, ...] = ()
    action: str | None = None
    native_handle: str | None = None


class Transport(Protocol):
    async def reply(self, text: str, options: Options | None = None) -> None: ...

    async def reply_with_image(self, reference: str, caption: str, options: Options | None = None) -> None: ...

    async def edit_last_message(self, text: str | None = None, options: Options | None = None) -> None: ...

    def send_to(self, user_id: str, text: str) -> None: ...


def event_from_update(update: Update) -> Event:
    user = update.effective_user
    user_id = str(user.id if user else update.effective_chat.id)
    native_handle = user.username if user and user.username else None

    if update.callback_query is not None:
        return Event(user_id=user_id, action=update.callback_query.data, native_handle=native_handle)

    message = update.effective_message
    if message is not None and message.photo:
        photos = tuple(
            PhotoVariant(reference=p.file_id, width=p.width, height=p.height) for p in message.photo
        )
        return Event(user_id=user_id, photos=photos, native_handle=native_handle)

    text = message.text if message is not None else None
    return Event(user_id=user_id, text=text, native_handle=native_handle)


class TelegramTransport:
    def __init__(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        self._update = update
        self._context = context
        self._chat_id = update.effective_chat.id

    async def reply(self, text: str, options: Options | None = None) -> None:
        await self._context.bot.send_message(chat_id=self._chat_id, text=text, reply_markup=to_markup(options))

    async def reply_with_image(self, reference: str, caption: str, options: Options | None = None) -> None:
        await self._context.bot.send_photo(
            chat_id=self._chat_id,
            photo=reference,
            caption=caption,
            reply_markup=to_markup(options),
        )

    async def edit_last_message(self, text: str | None = None, options: Options | None = None) -> None:
        query = self._update.callback_query
        if query is None or query.message is None:
            if text:
                await self.reply(text, options)
            return
        if text is not None:
            await query.edit_message_text(text, reply_markup=to_markup(options))
        else:
            await query.edit_message_reply_markup(reply_markup=to_markup(options))

    def send_to(self, user_id: str, text: str) -> None:
        self._context.application.create_task(self._deliver(user_id, text))

    async def _deliver(self, user_id: str, text: str) -> None:
        try:
            await self._context.bot.send_message(chat_id=int(user_id), text=text)
        except (TelegramError, ValueError) as exc:
            logger.warning("Notification to %s failed: %s", user_id, exc)
