# settings come from the environment (or a local .env) and are read once at import

from __future__ import annotations
import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()  # a .env file is optional, real environment variables win

INT32_MAX = 2**31 - 1

@dataclass(frozen=True)
class Settings:
    # maximum value of the integer type squares are reported in
    max_int: int = INT32_MAX

    @classmethod
    def from_env(cls) -> "Settings":
        raw = os.getenv("LINQQUIZ_MAX_INT")
        if raw is None or not raw.strip():
            return cls()
        try:
            max_int = int(raw)
        except ValueError as exc:
            raise ValueError(f"LINQQUIZ_MAX_INT must be an integer (got {raw!r})") from exc
        if max_int < 1:
            raise ValueError(f"LINQQUIZ_MAX_INT must be positive (got {max_int})")
        return cls(max_int=max_int)

settings = Settings.from_env()
