from researcher.managers.config_manager import config_manager
from researcher.model import WordCount
from ..core import ResearchDefinition, research_spec
from ..html import strip_tags
from ..models import Paper
from ..words import count_characters, count_words


@research_spec(result_type=WordCount)
def word_count_in_text(paper: Paper, researcher=None) -> WordCount:
    """
    Counts the words in the visible text of the paper.
    Languages written without spaces (Japanese, Chinese) are counted in characters.
    """
    text = strip_tags(paper.text)
    character_languages = config_manager.get_nested(
        "researches.word_count_in_text.character_languages", ["ja", "zh"]
    )

    if paper.language in character_languages:
        return WordCount(count=count_characters(text), unit="character")
    return WordCount(count=count_words(text), unit="word")


DEFINITION = ResearchDefinition(
    name="word_count_in_text",
    research=word_count_in_text
)
