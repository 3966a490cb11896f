import unicodedata

from ..core import ResearchDefinition, research_spec
from ..models import Paper


@research_spec(result_type=int)
def get_meta_description_length(paper: Paper, researcher=None) -> int:
    """Length of the paper's meta description in characters."""
    return len(unicodedata.normalize("NFC", paper.description.strip()))


DEFINITION = ResearchDefinition(
    name="meta_description_length",
    research=get_meta_description_length
)
