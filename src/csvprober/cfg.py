from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    # ── Próbkowanie (domyślne wartości, nadpisywalne z ENV / .env)
    PROBE_RECORDS: int = Field(default=200, gt=0)
    # znaki kandydatów jeden po drugim; dozwolone \t, \s, \\
    PROBE_DELIMITERS: str = Field(default=",;#|")
    PROBE_ENCODING: str = Field(default="utf-8-sig")

    # ── LOG
    LOG_LEVEL: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )


settings = Settings()
