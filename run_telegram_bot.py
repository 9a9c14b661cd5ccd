"""Telegram bot entrypoint.

Loads environment variables from .env automatically (project root).
"""

from lovematch.bot.main import main

if __name__ == "__main__":
    main()
