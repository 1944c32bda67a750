"""Settings for the replay service, read from environment variables prefixed with REPLAY_"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Configuration of the storage and translation layers.

    ex) REPLAY_DATABASE_URL=postgresql://user@host/replays REPLAY_STRICT_TURNS=true
    """

    model_config = SettingsConfigDict(env_prefix="REPLAY_", extra="ignore")

    database_url: str = "sqlite:///replays.db"
    database_echo: bool = False
    log_level: str = "INFO"

    # Check that frames[turn].Turn == turn when looking up a frame
    strict_turns: bool = False

    # zlib level used when writing archives (0 = no compression, 9 = smallest)
    archive_compresslevel: int = Field(default=6, ge=0, le=9)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
