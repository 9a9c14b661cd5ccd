from telegram.ext import Application, CallbackQueryHandler, CommandHandler, MessageHandler, filters

from lovematch.bot.handlers.messages import (
    cmd_start,
    handle_callback,
    handle_photo_message,
    handle_text_message,
    on_error,
)
from lovematch.bot.middleware.throttle import wrap_serialized


def register_handlers(app: Application) -> None:
    app.add_handler(CommandHandler("start", wrap_serialized(cmd_start)))
    app.add_handler(CallbackQueryHandler(wrap_serialized(handle_callback)))
    app.add_handler(MessageHandler(filters.PHOTO, wrap_serialized(handle_photo_message)))
    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, wrap_serialized(handle_text_message)))

    app.add_error_handler(on_error)
