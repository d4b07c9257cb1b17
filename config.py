"""
Configuration settings for the thinkbot server
"""
import os
from dataclasses import dataclass
from typing import Optional

from knowledge import FACT_MATCH_POLICIES

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass
class Config:
    """Runtime settings, read from THINKBOT_* environment variables"""
    host: str = "127.0.0.1"
    port: int = 5000
    debug: bool = False
    log_level: str = "INFO"

    # "first" answers with the first taught phrase found in the message,
    # "longest" with the most specific one
    fact_match: str = "first"

    # None leaves greetings/jokes/fallbacks unseeded
    random_seed: Optional[int] = None

    def __post_init__(self):
        if self.fact_match not in FACT_MATCH_POLICIES:
            raise ValueError(
                f"fact_match must be one of {FACT_MATCH_POLICIES}, got {self.fact_match!r}"
            )
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {self.log_level!r}")
        if not 0 < self.port < 65536:
            raise ValueError(f"port out of range: {self.port}")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def get_config() -> Config:
    """Build a Config from the environment"""
    return Config(
        host=os.getenv("THINKBOT_HOST", Config.host),
        port=_env_int("THINKBOT_PORT", Config.port),
        debug=_env_bool("THINKBOT_DEBUG", Config.debug),
        log_level=os.getenv("THINKBOT_LOG_LEVEL", Config.log_level),
        fact_match=os.getenv("THINKBOT_FACT_MATCH", Config.fact_match).strip().lower(),
        random_seed=_env_int("THINKBOT_SEED", None),
    )
