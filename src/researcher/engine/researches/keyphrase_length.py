from researcher.model import KeyphraseLength
from ..core import ResearchDefinition, research_spec
from ..models import Paper
from ..words import get_words


@research_spec(result_type=KeyphraseLength)
def get_keyphrase_length(paper: Paper, researcher=None) -> KeyphraseLength:
    """
    Number of content words in the focus keyphrase.
    Function words come from the 'function_words' config of the researcher; without it every word counts.
    """
    function_words = set()
    if researcher is not None:
        function_words = {word.lower() for word in researcher.get_config("function_words") or []}

    words = get_words(paper.keyword)
    content_words = [w for w in words if w.lower() not in function_words]

    # A keyphrase made of function words only still has a length
    length = len(content_words) if content_words else len(words)
    return KeyphraseLength(keyphrase_length=length, function_words=sorted(function_words))


DEFINITION = ResearchDefinition(
    name="keyphrase_length",
    research=get_keyphrase_length
)
