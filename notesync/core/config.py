from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./notesync.db"
    database_echo: bool = False

    log_level: str = "INFO"

    # Поле origin в метаданных доменных событий
    event_origin: str = "syncing-server"

    model_config = {"env_file": ".env", "env_prefix": "NOTESYNC_", "extra": "ignore"}


settings = Settings()
