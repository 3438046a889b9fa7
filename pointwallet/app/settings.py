from __future__ import annotations

import os
from dataclasses import dataclass


def _as_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = 8080
    debug: bool = False
    bootstrap_user_id: int = 0
    bootstrap_amount: int = 0


def load_settings() -> Settings:
    return Settings(
        host=os.getenv("POINTWALLET_HOST", "127.0.0.1"),
        port=int(os.getenv("POINTWALLET_PORT", "8080")),
        debug=_as_bool(os.getenv("POINTWALLET_DEBUG"), False),
        bootstrap_user_id=max(0, int(os.getenv("POINTWALLET_BOOTSTRAP_USER", "0"))),
        bootstrap_amount=max(0, int(os.getenv("POINTWALLET_BOOTSTRAP_AMOUNT", "0"))),
    )
