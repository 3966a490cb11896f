# tests/engine/test_researches.py
import pytest

from researcher.engine.locale import StopwordLocaleResolver
from researcher.engine.models import Paper
from researcher.engine.registry import ResearchRegistry
from researcher.engine.researcher import Researcher
from researcher.model import KeywordCount, LinkStatistics, WordCount


def research(name: str, resolver=None, **paper_kwargs):
    """Hulpfunctie: bouw een paper + researcher en voer één research uit."""
    return Researcher(Paper(**paper_kwargs), locale_resolver=resolver).get_research(name)


# --- Registry ---

def test_all_default_researches_are_registered():
    assert ResearchRegistry.get_all_names() == [
        "alt_tag_count",
        "h1s",
        "keyphrase_length",
        "keyword_count",
        "link_statistics",
        "long_center_aligned_texts",
        "meta_description_length",
        "paragraph_lengths",
        "subheading_text_lengths",
        "word_count_in_text",
    ]


def test_definition_metadata():
    defn = ResearchRegistry.get_definition("keyword_count")

    assert defn.result_type is KeywordCount
    assert defn.requires == ["word_count_in_text"]
    assert defn.description.startswith("Counts exact occurrences")
    assert ResearchRegistry.get_definition("nope") is None


# --- word_count_in_text ---

def test_word_count_ignores_markup():
    assert research("word_count_in_text", text="<p>One <b>two</b> three-four, don't.</p>") == WordCount(count=4)


def test_word_count_empty_text():
    assert research("word_count_in_text", text="").count == 0


def test_word_count_counts_characters_for_japanese():
    result = research("word_count_in_text", text="<p>日本語の文章。</p>", locale="ja")

    assert result == WordCount(count=6, unit="character")


# --- h1s ---

def test_h1s_with_positions():
    text = "<h1>Title</h1><p>Intro</p><h1 class='x'>Second <em>one</em></h1>"
    result = research("h1s", text=text)

    assert [(h.content, h.position) for h in result] == [("Title", 0), ("Second one", 2)]


def test_h1s_none():
    assert research("h1s", text="<h2>Sub</h2><p>Text</p>") == []


# --- paragraph_lengths ---

def test_paragraph_lengths_from_tags():
    result = research("paragraph_lengths", text="<p>One two three.</p><p></p><p>Four five.</p>")

    assert [(p.text, p.count_length) for p in result] == [("One two three.", 3), ("Four five.", 2)]


def test_paragraph_lengths_from_blank_lines():
    result = research("paragraph_lengths", text="First block here.\n\nSecond block.\n  \nThird")

    assert [p.count_length for p in result] == [3, 2, 1]


# --- subheading_text_lengths ---

def test_subheading_text_lengths():
    text = "<p>Intro is skipped.</p><h2>First</h2><p>One two three.</p><h3>Second</h3><p>Four.</p>"
    result = research("subheading_text_lengths", text=text)

    assert [(s.subheading, s.text, s.count_length) for s in result] == [
        ("<h2>First</h2>", "One two three.", 3),
        ("<h3>Second</h3>", "Four.", 1),
    ]


def test_subheading_text_lengths_without_subheadings():
    assert research("subheading_text_lengths", text="<p>No headings</p>") == []


# --- link_statistics ---

def test_link_statistics():
    text = (
        '<a href="/internal">internal</a>'
        '<a href="https://www.example.com/page" rel="nofollow">internal nofollow</a>'
        '<a href="https://blog.example.com/">subdomain</a>'
        '<a href="https://other.org/">external seo tips</a>'
        '<a href="https://other.org/x" rel="noopener nofollow">external nofollow</a>'
        '<a href="#top">anchor</a>'
        '<a href="mailto:me@example.com">mail</a>'
        '<a>no href</a>'
    )
    result = research(
        "link_statistics",
        text=text,
        keyword="seo tips",
        attributes={"permalink": "https://example.com/post"}
    )

    assert result == LinkStatistics(
        total=7,
        total_nofollow=2,
        internal_total=3,
        internal_dofollow=2,
        internal_nofollow=1,
        external_total=2,
        external_dofollow=1,
        external_nofollow=1,
        other_total=2,
        keyword_in_anchor=1,
    )


def test_link_statistics_without_permalink_treats_absolute_links_as_external():
    result = research("link_statistics", text='<a href="https://other.org/">x</a><a href="/a">y</a>')

    assert result.external_total == 1
    assert result.internal_total == 1


# --- alt_tag_count ---

def test_alt_tag_count():
    text = (
        '<img src="a.png">'
        '<img src="b.png" alt="">'
        '<img src="c.png" alt="Red apples">'
        '<img src="d.png" alt="A pear">'
    )
    result = research("alt_tag_count", text=text, keyword="apples")

    assert (result.no_alt, result.with_alt, result.with_alt_keyword, result.with_alt_non_keyword) == (2, 2, 1, 1)


def test_alt_tag_count_without_keyword():
    result = research("alt_tag_count", text='<img src="c.png" alt="Red apples">')

    assert (result.with_alt, result.with_alt_keyword, result.with_alt_non_keyword) == (1, 0, 0)


# --- keyphrase_length ---

def test_keyphrase_length_without_function_words():
    assert research("keyphrase_length", keyword="the best seo plugin").keyphrase_length == 4


def test_keyphrase_length_with_locale_function_words():
    result = research("keyphrase_length", resolver=StopwordLocaleResolver(), keyword="the best seo plugin")

    assert result.keyphrase_length == 3
    assert "the" in result.function_words


def test_keyphrase_length_only_function_words():
    result = research("keyphrase_length", resolver=StopwordLocaleResolver(), keyword="of the")

    assert result.keyphrase_length == 2


# --- keyword_count ---

def test_keyword_count_and_density():
    text = "<p>Apples are great. I like apples and pineapples.</p>"
    result = research("keyword_count", text=text, keyword="apples")

    assert result.count == 2
    assert result.matches == ["Apples", "apples"]
    assert result.density == pytest.approx(2 / 8 * 100, rel=1e-3)


def test_keyword_count_uses_overridden_word_count():
    researcher = Researcher(Paper(text="apples apples", keyword="apples"))
    researcher.add_research("word_count_in_text", lambda paper, r: WordCount(count=100))

    assert researcher.get_research("keyword_count").density == 2.0


def test_keyword_count_uses_match_word_helper():
    researcher = Researcher(Paper(text="auto's en auto", keyword="auto", locale="nl_NL"),
                            locale_resolver=StopwordLocaleResolver())

    assert researcher.get_research("keyword_count").count == 1


def test_keyword_count_without_keyword():
    assert research("keyword_count", text="some text") == KeywordCount()


# --- meta_description_length ---

def test_meta_description_length():
    assert research("meta_description_length", attributes={"description": "  Short description.  "}) == 18
    assert research("meta_description_length") == 0
