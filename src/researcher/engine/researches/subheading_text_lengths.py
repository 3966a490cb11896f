from typing import List

from researcher.managers.config_manager import config_manager
from researcher.model import SubheadingText
from ..core import ResearchDefinition, research_spec
from ..html import find_elements, strip_tags
from ..models import Paper
from ..words import count_words


@research_spec(result_type=SubheadingText)
def get_subheading_text_lengths(paper: Paper, researcher=None) -> List[SubheadingText]:
    """
    Measures the text below each subheading, up to the next subheading.
    Text before the first subheading is not part of any section.
    """
    tags = config_manager.get_nested("researches.subheading_text_lengths.tags", ["h2", "h3"])
    subheadings = find_elements(paper.text, tags)

    results = []
    for i, subheading in enumerate(subheadings):
        section_end = subheadings[i + 1].start if i + 1 < len(subheadings) else len(paper.text)
        # Nested subheadings (invalid, but possible) yield an empty section
        section_text = strip_tags(paper.text[subheading.end:max(section_end, subheading.end)])
        results.append(SubheadingText(
            subheading=subheading.outer_html,
            text=section_text,
            count_length=count_words(section_text)
        ))
    return results


DEFINITION = ResearchDefinition(
    name="subheading_text_lengths",
    research=get_subheading_text_lengths
)
