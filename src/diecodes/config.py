from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="DIECODES_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Defaults for the command line; the -e / -6 switches can only turn these on.
    explode: bool = False
    force_standard_66: bool = False

    # quiet: results only. verbose: every individual die as well.
    verbosity: Literal["quiet", "standard", "verbose"] = "standard"

    # Threshold for the stdlib logging handler on stderr.
    log_level: str = "WARNING"


def get_settings() -> Settings:
    return Settings()
