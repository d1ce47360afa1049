import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

# Repository root, one level above the correcteur package
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

LT_URL = "https://api.languagetool.org/v2/check"


def _optional_float(name: str) -> Optional[float]:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return None
    return float(raw)


@dataclass(frozen=True)
class Settings:
    languagetool_url: str = LT_URL
    language: str = "fr"
    timeout: Optional[float] = None  # None -> transport default (no timeout)
    confidence_threshold: float = 0.2
    highlight_class: str = "correction-highlight"
    log_level: str = "INFO"


def load_settings(env_file: Optional[str] = None) -> Settings:
    """
    Build Settings from the environment.
    A .env file at the project root (or env_file) is loaded first; real
    environment variables win over it.
    """
    load_dotenv(env_file or os.path.join(BASE_DIR, ".env"))

    threshold = _optional_float("CORRECTION_CONFIDENCE_THRESHOLD")

    return Settings(
        languagetool_url=os.getenv("LANGUAGETOOL_URL") or LT_URL,
        language=os.getenv("LANGUAGETOOL_LANGUAGE") or "fr",
        timeout=_optional_float("LANGUAGETOOL_TIMEOUT"),
        confidence_threshold=0.2 if threshold is None else threshold,
        highlight_class=os.getenv("HIGHLIGHT_CLASS") or "correction-highlight",
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
