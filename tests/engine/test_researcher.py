# tests/engine/test_researcher.py
import logging

import pytest

from researcher.engine.models import Paper
from researcher.engine.registry import ResearchRegistry
from researcher.engine.researcher import Researcher
from researcher.errors import InvalidType, MissingArgument
from researcher.model import WordCount


@pytest.fixture
def researcher():
    """Een verse Researcher voor elke test, gebonden aan één paper."""
    return Researcher(Paper(text="This is another paper!"))


# --- Aanmaken ---

def test_researcher_holds_paper():
    """Test of de researcher de paper ongewijzigd bewaart."""
    researcher = Researcher(Paper(text="This is a paper!"))

    assert researcher.paper.text == "This is a paper!"
    assert researcher.paper.keyword == ""


def test_default_researches_are_discovered(researcher):
    """De ingebouwde researches moeten automatisch gevonden worden."""
    assert "word_count_in_text" in researcher.default_researches
    assert "long_center_aligned_texts" in researcher.default_researches
    assert researcher.custom_researches == {}


def test_default_table_is_copied_per_researcher():
    """Twee researchers mogen niet dezelfde dict delen."""
    first = Researcher(Paper(text="a"))
    second = Researcher(Paper(text="b"))

    first.default_researches.pop("word_count_in_text")
    assert "word_count_in_text" in second.default_researches
    assert "word_count_in_text" in ResearchRegistry.get_default_researches()


# --- Aanroepen ---

def test_get_research_without_name_raises(researcher):
    with pytest.raises(MissingArgument):
        researcher.get_research("")


def test_get_research_unknown_name_returns_none(researcher):
    """Een onbekende naam is geen fout: het resultaat is gewoon leeg."""
    assert not researcher.get_research("foobar")


def test_get_research_word_count(researcher):
    result = researcher.get_research("word_count_in_text")

    assert result.count == 4
    assert result.unit == "word"


def test_get_research_passes_paper_and_researcher(researcher):
    """Een custom research krijgt de paper én de researcher zelf mee."""
    received = {}

    def capture(paper, owner):
        received["paper"] = paper
        received["owner"] = owner
        return "ok"

    researcher.add_research("capture", capture)

    assert researcher.get_research("capture") == "ok"
    assert received["paper"] is researcher.paper
    assert received["owner"] is researcher


# --- Researches toevoegen ---

def test_add_research_without_name_raises(researcher):
    with pytest.raises(MissingArgument):
        researcher.add_research("", lambda paper, r: None)

    assert len(researcher.custom_researches) == 0


def test_add_research_without_function_raises(researcher):
    with pytest.raises(InvalidType):
        researcher.add_research("foobar", None)

    assert len(researcher.custom_researches) == 0


def test_add_research_and_overwrite(researcher):
    """Dezelfde naam twee keer registreren overschrijft; de grootte blijft 1."""
    researcher.add_research("foo", lambda paper, r: True)
    assert len(researcher.custom_researches) == 1

    researcher.add_research("foo", lambda paper, r: False)
    assert len(researcher.custom_researches) == 1
    assert researcher.get_research("foo") is False


def test_custom_research_overrides_default(researcher):
    """Een custom research met de naam van een default vervangt die bij opvragen, zonder extra entry."""
    researcher.add_research("foo", lambda paper, r: True)
    total = len(researcher.default_researches) + len(researcher.custom_researches)
    assert len(researcher.get_available_researches()) == total

    researcher.add_research("word_count_in_text", lambda paper, r: WordCount(count=9000, unit="character"))

    assert len(researcher.get_available_researches()) == total
    assert researcher.get_research("word_count_in_text").count == 9000
    # De default blijft bestaan, hij wordt alleen overschaduwd
    assert "word_count_in_text" in researcher.default_researches


def test_override_wins_regardless_of_order():
    """Ook na een eerdere aanroep van de default wint de override."""
    researcher = Researcher(Paper(text="one two three"))
    assert researcher.get_research("word_count_in_text").count == 3

    researcher.add_research("word_count_in_text", lambda paper, r: "custom")
    assert researcher.get_research("word_count_in_text") == "custom"


def test_has_research(researcher):
    researcher.add_research("foo", lambda paper, r: 1)

    assert researcher.has_research("foo")
    assert researcher.has_research("word_count_in_text")
    assert not researcher.has_research("bar")


# --- Helpers ---

def test_add_helper_without_name_raises(researcher):
    with pytest.raises(MissingArgument):
        researcher.add_helper("", lambda: None)

    assert len(researcher.helpers) == 0


def test_add_helper_without_function_raises(researcher):
    with pytest.raises(InvalidType):
        researcher.add_helper("foobar", "not a function")

    assert len(researcher.helpers) == 0


def test_add_helper_and_overwrite(researcher):
    researcher.add_helper("foo", lambda: True)
    assert len(researcher.helpers) == 1

    researcher.add_helper("foo", lambda: False)
    assert len(researcher.helpers) == 1
    assert researcher.get_helper("foo")() is False
    assert researcher.has_helper("foo")
    assert researcher.get_helper("bar") is None


# --- Config ---

def test_add_config_without_name_raises(researcher):
    with pytest.raises(MissingArgument):
        researcher.add_config("", {"a": 1})

    assert len(researcher.config) == 0


def test_add_config_with_empty_value_raises(researcher):
    with pytest.raises(MissingArgument):
        researcher.add_config("pets", {})
    with pytest.raises(MissingArgument):
        researcher.add_config("pets", [])

    assert len(researcher.config) == 0


def test_add_config_without_value_raises(researcher):
    with pytest.raises(MissingArgument):
        researcher.add_config("pets")

    assert len(researcher.config) == 0


def test_add_config_and_overwrite(researcher):
    """Herhaald toevoegen overschrijft de waarde, er wordt niets samengevoegd."""
    researcher.add_config("pets", ["cats", "dogs", "rabbits"])
    assert len(researcher.config) == 1
    assert researcher.get_config("pets") == ["cats", "dogs", "rabbits"]

    researcher.add_config("pets", ["birds", "horses", "tortoise"])
    assert len(researcher.config) == 1
    assert researcher.has_config("pets")
    assert researcher.get_config("pets") == ["birds", "horses", "tortoise"]
    assert researcher.get_available_config() == {"pets": ["birds", "horses", "tortoise"]}


def test_add_config_accepts_scalars(researcher):
    """Getallen zijn geen collecties; ook 0 is een geldige waarde."""
    researcher.add_config("threshold", 0)
    assert researcher.get_config("threshold") == 0


def test_get_config_unknown_returns_none(researcher):
    assert researcher.get_config("nothing") is None
    assert not researcher.has_config("nothing")


def test_available_config_is_a_snapshot(researcher):
    researcher.add_config("pets", ["cats"])
    snapshot = researcher.get_available_config()
    snapshot["other"] = ["x"]

    assert not researcher.has_config("other")


# --- Research data ---

def test_add_and_get_research_data(researcher):
    researcher.add_research_data("newResearch", "some data")

    assert researcher.get_data("newResearch") == "some data"
    assert researcher.get_data("unknown") is None


def test_replacing_research_data_is_logged(researcher, caplog):
    """Een tweede waarde onder dezelfde naam vervangt de eerste, en dat is zichtbaar in de log."""
    caplog.set_level(logging.DEBUG, logger="researcher.engine.researcher")
    researcher.add_research_data("morphology", "first")
    assert "is replaced" not in caplog.text

    researcher.add_research_data("morphology", "second")

    assert researcher.get_data("morphology") == "second"
    assert "Research data 'morphology' is replaced." in caplog.text


def test_add_research_data_without_name_raises(researcher):
    with pytest.raises(MissingArgument):
        researcher.add_research_data("", "some data")


def test_research_data_is_separate_from_results(researcher):
    """Data met de naam van een research verandert het research-resultaat niet."""
    researcher.add_research_data("word_count_in_text", {"count": 1})

    assert researcher.get_research("word_count_in_text").count == 4
    assert researcher.get_data("word_count_in_text") == {"count": 1}


def test_state_is_scoped_to_one_researcher():
    """Config, helpers en customs lekken niet naar een researcher van een andere paper."""
    first = Researcher(Paper(text="first"))
    second = Researcher(Paper(text="second"))

    first.add_config("pets", ["cats"])
    first.add_helper("foo", lambda: 1)
    first.add_research("bar", lambda paper, r: 2)
    first.add_research_data("baz", 3)

    assert second.get_config("pets") is None
    assert second.get_helper("foo") is None
    assert second.get_research("bar") is None
    assert second.get_data("baz") is None
