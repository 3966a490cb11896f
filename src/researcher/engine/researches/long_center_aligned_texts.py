from typing import List

from researcher.managers.config_manager import config_manager
from researcher.model import LongCenterAlignedText
from ..core import ResearchDefinition, research_spec
from ..html import HEADING_TAGS, PARAGRAPH_TAGS, find_elements, visible_length
from ..models import Paper

DEFAULT_MAX_CHARACTERS = 50
DEFAULT_MARKER_CLASS = "has-text-align-center"


def _setting(researcher, config_name: str, settings_key: str, default):
    """Per-document config first, then settings.json, then the built-in default."""
    value = researcher.get_config(config_name) if researcher is not None else None
    if value is None:
        value = config_manager.get_nested(f"researches.long_center_aligned_texts.{settings_key}", default)
    return value


@research_spec(result_type=LongCenterAlignedText)
def get_long_center_aligned_texts(paper: Paper, researcher=None) -> List[LongCenterAlignedText]:
    """
    Finds paragraphs and headings with center-aligned text longer than the threshold.

    Center alignment is recognised by the class token of the block editor
    ('has-text-align-center'); only the visible text counts towards the length.
    Paragraphs are listed before headings, each group in document order.
    """
    max_characters = _setting(researcher, "center_aligned_text_max_characters", "max_characters", DEFAULT_MAX_CHARACTERS)
    marker_class = _setting(researcher, "center_aligned_marker_class", "marker_class", DEFAULT_MARKER_CLASS)

    paragraphs = []
    headings = []

    for element in find_elements(paper.text, PARAGRAPH_TAGS + HEADING_TAGS):
        if not element.has_class(marker_class):
            continue
        if visible_length(element.inner_html) <= max_characters:
            continue

        if element.is_heading:
            headings.append(LongCenterAlignedText(text=element.outer_html, element_type="heading"))
        else:
            paragraphs.append(LongCenterAlignedText(text=element.outer_html, element_type="paragraph"))

    return paragraphs + headings


DEFINITION = ResearchDefinition(
    name="long_center_aligned_texts",
    research=get_long_center_aligned_texts
)
