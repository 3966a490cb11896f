from typing import Any, Callable, List, Optional, Type, TYPE_CHECKING

from .models import Paper

if TYPE_CHECKING:
    from .researcher import Researcher

# A research receives the paper and the researcher that owns it (for config/helper access).
Research = Callable[[Paper, "Researcher"], Any]


def research_spec(result_type: Optional[Type] = None, requires: Optional[List[str]] = None):
    """
    Decorator to declare what a research returns and which other researches it calls.
    Read by the ResearchRegistry during discovery.
    """
    def decorator(func):
        func.result_type = result_type
        func.requires = list(requires or [])
        return func
    return decorator


class ResearchDefinition:
    """
    Configuration object binding a research name to its function.
    Every module in 'researcher.engine.researches' exposes one as DEFINITION.
    """

    def __init__(self, name: str, research: Research, description: str = ""):
        self.name = name
        self.research = research
        self.description = description or (research.__doc__ or "").strip().split("\n")[0]

        # --- Metadata declared through @research_spec ---
        self.result_type = getattr(research, "result_type", None)
        self.requires: List[str] = list(getattr(research, "requires", []))

    def __repr__(self) -> str:
        return f"<ResearchDefinition {self.name}>"
