import re
from typing import List

from researcher.model import ParagraphLength
from ..core import ResearchDefinition, research_spec
from ..html import PARAGRAPH_TAGS, find_elements, strip_tags
from ..models import Paper
from ..words import count_words

_BLANK_LINE_RE = re.compile(r"\n\s*\n")


@research_spec(result_type=ParagraphLength)
def get_paragraph_lengths(paper: Paper, researcher=None) -> List[ParagraphLength]:
    """
    Word count per paragraph.

    Uses the <p> elements of the paper; plain text without paragraph tags is
    split on blank lines instead. Empty paragraphs are skipped.
    """
    paragraphs = [element.text for element in find_elements(paper.text, PARAGRAPH_TAGS)]
    if not paragraphs:
        paragraphs = [strip_tags(block) for block in _BLANK_LINE_RE.split(paper.text)]

    results = []
    for text in paragraphs:
        length = count_words(text)
        if length:
            results.append(ParagraphLength(text=text, count_length=length))
    return results


DEFINITION = ResearchDefinition(
    name="paragraph_lengths",
    research=get_paragraph_lengths
)
