import logging
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup

from researcher.model import LinkStatistics
from ..core import ResearchDefinition, research_spec
from ..models import Paper

logger = logging.getLogger(__name__)

SPECIAL_PREFIXES = ('#', 'mailto:', 'tel:', 'javascript:')


def _is_external(href: str, base_url: str) -> bool:
    """A link is external when its domain differs from (and is no subdomain of) the paper's domain."""
    abs_url = urljoin(base_url, href) if base_url else href
    # Normalize domains by removing 'www.' prefix
    source_domain = urlparse(base_url).netloc.lower().removeprefix("www.")
    target_domain = urlparse(abs_url).netloc.lower().removeprefix("www.")

    if not target_domain:
        return False
    if not source_domain:
        return True
    return target_domain != source_domain and not target_domain.endswith(f".{source_domain}")


def _anchor_has_keyword(anchor_text: str, keyword: str, researcher) -> bool:
    if not keyword or not anchor_text:
        return False
    match_word = researcher.get_helper("match_word") if researcher is not None else None
    if match_word:
        return bool(match_word(anchor_text, keyword))
    return keyword.lower() in anchor_text.lower()


@research_spec(result_type=LinkStatistics)
def get_link_statistics(paper: Paper, researcher=None) -> LinkStatistics:
    """
    Counts the links of the paper, split into internal/external and follow/nofollow.
    The paper's permalink is the reference for deciding whether a link is internal.
    """
    stats = LinkStatistics()
    if not paper.has_text():
        return stats

    soup = BeautifulSoup(paper.text, 'html.parser')
    base_url = paper.permalink

    for anchor in soup.find_all('a', href=True):
        href = anchor['href'].strip()
        stats.total += 1

        rel = anchor.get('rel') or []
        if isinstance(rel, str):
            rel = rel.split()
        nofollow = "nofollow" in [r.lower() for r in rel]
        if nofollow:
            stats.total_nofollow += 1

        if _anchor_has_keyword(anchor.get_text(" ", strip=True), paper.keyword, researcher):
            stats.keyword_in_anchor += 1

        if not href or href.lower().startswith(SPECIAL_PREFIXES):
            stats.other_total += 1
            continue

        try:
            external = _is_external(href, base_url)
        except ValueError as e:
            # urlparse rejects some malformed hosts (e.g. unbalanced IPv6 brackets)
            logger.debug("Skipping malformed link %r: %s", href, e)
            stats.other_total += 1
            continue

        if external:
            stats.external_total += 1
            if nofollow:
                stats.external_nofollow += 1
            else:
                stats.external_dofollow += 1
        else:
            stats.internal_total += 1
            if nofollow:
                stats.internal_nofollow += 1
            else:
                stats.internal_dofollow += 1

    return stats


DEFINITION = ResearchDefinition(
    name="link_statistics",
    research=get_link_statistics
)
