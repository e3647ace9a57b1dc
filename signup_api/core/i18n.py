"""Locale resolution and message lookup."""
import json
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional

from fastapi import Request

from signup_api.core.config import settings


LOCALES_DIR = Path(__file__).resolve().parent.parent / "locales"
SUPPORTED_LANGUAGES = ("en", "kr")
LANGUAGE_ALIASES = {"ko": "kr"}


@lru_cache(maxsize=None)
def load_messages(language: str) -> Dict[str, str]:
    """Load the translation table for a supported language."""
    with open(LOCALES_DIR / f"{language}.json", encoding="utf-8") as fh:
        return json.load(fh)


def _parse_accept_language(header: str) -> List[str]:
    """Return language tags from an Accept-Language header, best first."""
    weighted = []
    for position, part in enumerate(header.split(",")):
        tag, _, params = part.strip().partition(";")
        tag = tag.strip().lower()
        if not tag or tag == "*":
            continue
        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                continue
        if quality <= 0:
            continue
        weighted.append((-quality, position, tag))
    return [tag for _, _, tag in sorted(weighted)]


def _match_language(tag: str) -> Optional[str]:
    candidates = [tag, tag.split("-", 1)[0]]
    for candidate in candidates:
        candidate = LANGUAGE_ALIASES.get(candidate, candidate)
        if candidate in SUPPORTED_LANGUAGES:
            return candidate
    return None


def resolve_language(accept_language: Optional[str]) -> str:
    """Pick the best supported language, falling back to the default."""
    if accept_language:
        for tag in _parse_accept_language(accept_language):
            language = _match_language(tag)
            if language:
                return language
    return settings.DEFAULT_LANGUAGE


class Translator:
    """Message lookup bound to one language."""

    def __init__(self, language: str):
        self.language = language
        self.messages = load_messages(language)
        self.fallback = load_messages(settings.DEFAULT_LANGUAGE)

    def __call__(self, key: str) -> str:
        if key in self.messages:
            return self.messages[key]
        return self.fallback.get(key, key)


def get_translator(request: Request) -> Translator:
    """Dependency returning the translator for the request's Accept-Language."""
    return Translator(resolve_language(request.headers.get("accept-language")))
