from typing import Any, Dict, List, Literal
from pydantic import BaseModel, ConfigDict, Field


class WordCount(BaseModel):
    """Result of 'word_count_in_text'."""
    count: int = 0
    unit: Literal["word", "character"] = "word"


class LongCenterAlignedText(BaseModel):
    """
    A paragraph or heading with center-aligned text that is too long to read comfortably.
    `text` is the outer HTML of the element exactly as found in the paper.
    """
    model_config = ConfigDict(populate_by_name=True)

    text: str
    element_type: Literal["paragraph", "heading"] = Field(alias="elementType")


class HeadingInfo(BaseModel):
    tag: str = "h1"
    content: str = ""
    position: int = 0  # index among all paragraphs and headings of the paper


class ParagraphLength(BaseModel):
    text: str
    count_length: int


class SubheadingText(BaseModel):
    subheading: str
    text: str
    count_length: int


class LinkStatistics(BaseModel):
    """Link counts of a paper, split by locality and follow behaviour."""
    total: int = 0
    total_nofollow: int = 0
    internal_total: int = 0
    internal_dofollow: int = 0
    internal_nofollow: int = 0
    external_total: int = 0
    external_dofollow: int = 0
    external_nofollow: int = 0
    other_total: int = 0  # anchors, mailto:, tel:, javascript:
    keyword_in_anchor: int = 0


class AltTagCount(BaseModel):
    no_alt: int = 0
    with_alt: int = 0
    with_alt_keyword: int = 0
    with_alt_non_keyword: int = 0


class KeyphraseLength(BaseModel):
    keyphrase_length: int = 0
    function_words: List[str] = Field(default_factory=list)


class KeywordCount(BaseModel):
    count: int = 0
    matches: List[str] = Field(default_factory=list)
    density: float = 0.0  # occurrences per 100 words


class AnalysisReport(BaseModel):
    """
    Outcome of one analysis pass over a single paper.
    Results are stored in their serialised (JSON compatible) form.
    """
    index: int
    url: str = ""
    results: Dict[str, Any] = Field(default_factory=dict)
    errors: Dict[str, str] = Field(default_factory=dict)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)
