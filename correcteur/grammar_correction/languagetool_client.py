import logging
from typing import List, Optional

import requests

from ..config import LT_URL
from .errors import ProviderFailure

logger = logging.getLogger(__name__)

ENABLED_RULES = [
    "FR_AGREEMENT_VERB_INFINITIVE_PAST_PARTICIPLE",
    "CONFUSION_EST_ET",
    "FRENCH_VERB_AGREEMENT",   # subject/verb agreement
    "FR_CONJUGATION_ERROR",
    "FRENCH_SPELLING",
    "FR_MISC",
    "TYPOGRAPHY",
]

# Keep the user's spacing and French quotes as they are
DISABLED_RULES = ["WHITESPACE_RULE", "EN_QUOTES"]

LEVEL = "picky"  # default | default_with_ns | picky


class LanguageToolClient:
    def __init__(self, url: str = LT_URL, language: str = "fr", timeout: Optional[float] = None):
        self.url = url
        self.language = language
        self.timeout = timeout

    def build_payload(self, text: str) -> dict:
        return {
            "text": text,
            "language": self.language,
            "enabledRules": ",".join(ENABLED_RULES),
            "disabledRules": ",".join(DISABLED_RULES),
            "enabledOnly": "false",
            "level": LEVEL,
        }

    def check(self, text: str) -> List[dict]:
        """
        Returns:
          matches (list)  # raw LT matches, unordered
        Raises ProviderFailure on transport, HTTP or decoding errors.
        """
        try:
            r = requests.post(
                self.url,
                data=self.build_payload(text),
                headers={"Content-Type": "application/x-www-form-urlencoded"},
                timeout=self.timeout,
            )
            r.raise_for_status()
            out = r.json()
        except (requests.RequestException, ValueError) as e:
            raise ProviderFailure(f"LanguageTool request failed: {e}") from e

        matches = out.get("matches") if isinstance(out, dict) else None
        if not isinstance(matches, list):
            raise ProviderFailure("LanguageTool response has no 'matches' list")

        logger.debug("LanguageTool returned %d matches for %d chars", len(matches), len(text))
        return matches
