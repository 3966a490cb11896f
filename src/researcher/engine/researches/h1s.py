from typing import List

from researcher.model import HeadingInfo
from ..core import ResearchDefinition, research_spec
from ..html import HEADING_TAGS, PARAGRAPH_TAGS, find_elements
from ..models import Paper


@research_spec(result_type=HeadingInfo)
def get_h1s(paper: Paper, researcher=None) -> List[HeadingInfo]:
    """
    Lists the H1 headings of the paper with their text and block position.
    A position of 0 means the H1 opens the content.
    """
    blocks = find_elements(paper.text, PARAGRAPH_TAGS + HEADING_TAGS)
    return [
        HeadingInfo(tag=block.tag, content=block.text, position=position)
        for position, block in enumerate(blocks)
        if block.tag == "h1"
    ]


DEFINITION = ResearchDefinition(
    name="h1s",
    research=get_h1s
)
