from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    database_url: str = "sqlite:///./weight_tracker.db"
    # Timezone used to decide what "today" is when a request doesn't say.
    # Examples: "America/Sao_Paulo", "Europe/London", or "local" to use system tz.
    timezone: str = "local"
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Entries returned by the list endpoint when no limit is given
    entries_default_limit: int = 100

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v):
        if v in ("", None):
            return "INFO"
        return str(v).upper()

    class Config:
        env_file = ".env"


settings = Settings()
