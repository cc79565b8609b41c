from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ForumSettings(BaseSettings):
    """
    Environment-driven settings for the forum web app.
    Every field can be overridden with a THREADBOARD_* variable or a .env file.
    """

    model_config = SettingsConfigDict(env_prefix="THREADBOARD_", env_file=".env", extra="ignore")

    # ---- Database ----
    database_url: str = Field(default="sqlite:///threadboard.db")
    create_tables: bool = Field(default=True)

    # ---- Flask ----
    secret_key: str = Field(default="change-me")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=5000)
    debug: bool = Field(default=False)

    log_level: str = Field(default="INFO")


def load_settings() -> ForumSettings:
    return ForumSettings()
