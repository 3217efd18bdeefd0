"""Environment-driven settings for the synonym backend."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple


@dataclass(frozen=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: Tuple[str, ...] = ("*",)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ

        raw_port = env.get("SYNONYMS_PORT", str(cls.port)).strip()
        try:
            port = int(raw_port)
        except ValueError:
            raise ValueError(f"SYNONYMS_PORT must be an integer, got {raw_port!r}") from None

        origins = tuple(
            origin.strip()
            for origin in env.get("SYNONYMS_CORS_ORIGINS", "*").split(",")
            if origin.strip()
        )

        return cls(
            host=env.get("SYNONYMS_HOST", cls.host).strip() or cls.host,
            port=port,
            cors_origins=origins or cls.cors_origins,
            log_level=(env.get("SYNONYMS_LOG_LEVEL", cls.log_level).strip() or cls.log_level).upper(),
        )
