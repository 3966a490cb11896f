import re

from researcher.model import KeywordCount
from ..core import ResearchDefinition, research_spec
from ..html import strip_tags
from ..models import Paper


def _default_match_word(text: str, word: str):
    return re.findall(rf"\b{re.escape(word)}\b", text, flags=re.IGNORECASE)


@research_spec(result_type=KeywordCount, requires=["word_count_in_text"])
def get_keyword_count(paper: Paper, researcher=None) -> KeywordCount:
    """
    Counts exact occurrences of the focus keyword in the visible text.

    Matching uses the 'match_word' helper when the researcher has one (locale
    aware word boundaries). Density is expressed per 100 words, with the word
    count taken from the 'word_count_in_text' research so an override of that
    research is honoured.
    """
    if not paper.has_keyword() or not paper.has_text():
        return KeywordCount()

    text = strip_tags(paper.text)
    match_word = None
    if researcher is not None:
        match_word = researcher.get_helper("match_word")
    matches = (match_word or _default_match_word)(text, paper.keyword)

    word_count = 0
    if researcher is not None:
        word_count_result = researcher.get_research("word_count_in_text")
        word_count = getattr(word_count_result, "count", 0) or 0

    density = round(len(matches) / word_count * 100, 2) if word_count else 0.0
    return KeywordCount(count=len(matches), matches=list(matches), density=density)


DEFINITION = ResearchDefinition(
    name="keyword_count",
    research=get_keyword_count
)
