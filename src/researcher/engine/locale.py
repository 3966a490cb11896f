# src/researcher/engine/locale.py
import logging
import re
from typing import Callable, Dict, List, Optional, Protocol

from pydantic import BaseModel, Field

from researcher.utils.stopwords import get_function_words

logger = logging.getLogger(__name__)


class LocaleResources(BaseModel):
    """Language specific word lists and matchers handed to a Researcher."""
    language: str
    function_words: List[str] = Field(default_factory=list)
    helpers: Dict[str, Callable] = Field(default_factory=dict)


class LocaleResolver(Protocol):
    """Maps a locale identifier ('en_US', 'nl_NL') to its resources."""

    def resolve(self, locale: str) -> Optional[LocaleResources]:
        ...


def make_word_matcher(inner_word_chars: str = "") -> Callable[[str, str], List[str]]:
    """
    Builds a case-insensitive whole-word matcher.

    `inner_word_chars` lists characters that belong to a word in the language
    (e.g. the apostrophe in Dutch "auto's"), so a match never ends right before them.
    """
    boundary = re.escape(inner_word_chars)

    def match_word(text: str, word: str) -> List[str]:
        if not text or not word:
            return []
        pattern = rf"(?<![\w{boundary}]){re.escape(word)}(?![\w{boundary}])"
        return re.findall(pattern, text, flags=re.IGNORECASE)

    return match_word


class StopwordLocaleResolver:
    """Default resolver built on the bundled English and Dutch function word lists."""

    INNER_WORD_CHARS = {
        "en": "",
        "nl": "'-",
    }

    def resolve(self, locale: str) -> Optional[LocaleResources]:
        language = (locale or "").split("_")[0].lower()
        function_words = get_function_words(language)
        if not function_words:
            logger.debug("No function words available for locale '%s'", locale)
            return None

        return LocaleResources(
            language=language,
            function_words=sorted(function_words),
            helpers={"match_word": make_word_matcher(self.INNER_WORD_CHARS.get(language, ""))}
        )
