import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_path: Optional[str] = None
    max_attempts: Optional[int] = None
    seed: Optional[int] = None


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}.") from exc


def load_settings() -> Settings:
    log_level = os.getenv("SANTA_LOG_LEVEL", "INFO")
    log_path = os.getenv("SANTA_LOG_PATH") or None
    max_attempts = _optional_int("SANTA_MAX_ATTEMPTS")
    seed = _optional_int("SANTA_SEED")

    if max_attempts is not None and max_attempts < 1:
        raise ValueError("SANTA_MAX_ATTEMPTS must be at least 1.")

    return Settings(
        log_level=log_level,
        log_path=log_path,
        max_attempts=max_attempts,
        seed=seed,
    )
