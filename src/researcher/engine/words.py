import re
from typing import List

# Letters/digits, allowing inner apostrophes and hyphens ("don't", "e-mail")
_WORD_RE = re.compile(r"[^\W_]+(?:['’\-][^\W_]+)*")


def get_words(text: str) -> List[str]:
    """Splits plain text into words. Punctuation and whitespace are dropped."""
    if not text:
        return []
    return _WORD_RE.findall(text)


def count_words(text: str) -> int:
    return len(get_words(text))


def count_characters(text: str) -> int:
    """Counts characters that are not whitespace or punctuation (for languages without spaces)."""
    return sum(1 for ch in text if ch.isalnum())
