from bs4 import BeautifulSoup

from researcher.model import AltTagCount
from ..core import ResearchDefinition, research_spec
from ..models import Paper


@research_spec(result_type=AltTagCount)
def get_alt_tag_count(paper: Paper, researcher=None) -> AltTagCount:
    """
    Counts images by the state of their alt attribute.
    A missing or blank alt both count as 'no_alt'.
    """
    result = AltTagCount()
    if not paper.has_text():
        return result

    soup = BeautifulSoup(paper.text, 'html.parser')
    match_word = researcher.get_helper("match_word") if researcher is not None else None

    for image in soup.find_all('img'):
        alt = (image.get('alt') or "").strip()
        if not alt:
            result.no_alt += 1
            continue

        result.with_alt += 1
        if not paper.has_keyword():
            continue

        if match_word:
            has_keyword = bool(match_word(alt, paper.keyword))
        else:
            has_keyword = paper.keyword.lower() in alt.lower()

        if has_keyword:
            result.with_alt_keyword += 1
        else:
            result.with_alt_non_keyword += 1

    return result


DEFINITION = ResearchDefinition(
    name="alt_tag_count",
    research=get_alt_tag_count
)
