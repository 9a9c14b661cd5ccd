from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


PROJECT_ROOT = Path(__file__).resolve().parents[1]
ENV_FILES = [PROJECT_ROOT / ".env", ".env"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=ENV_FILES, extra="ignore")

    # DB
    DATABASE_URL: str = "sqlite:///./data/lovematch.db"

    # App
    APP_HOST: str = "127.0.0.1"
    APP_PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # API
    API_KEY: str | None = None

    # Telegram
    TELEGRAM_BOT_TOKEN: str | None = None
    BOT_LOCALE: str = "en"
    SUPPORT_HANDLE: str = "@YourSupportHandle"
    BOT_CONCURRENT_UPDATES: bool = False

    # Flood control
    BOT_BURST_MAX: int = 30
    BOT_BURST_WINDOW_SEC: int = 10


settings = Settings()
