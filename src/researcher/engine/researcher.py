# src/researcher/engine/researcher.py
import logging
from typing import Any, Callable, Dict, Optional, TYPE_CHECKING

from researcher.errors import InvalidType, MissingArgument
from .core import Research
from .models import Paper
from .registry import ResearchRegistry

if TYPE_CHECKING:
    from .locale import LocaleResolver, LocaleResources

logger = logging.getLogger(__name__)


class Researcher:
    """
    Per-document research registry and dispatcher.

    A Researcher is bound to exactly one Paper and lives for one analysis pass.
    It holds the default researches, caller-registered custom researches
    (which shadow defaults of the same name), helpers, named configuration and
    externally supplied research data. Nothing here is shared between papers.

    Lookups of unknown names return None; only misuse (empty names, values
    that are not callable, empty configuration) raises.
    """

    def __init__(self, paper: Paper, locale_resolver: Optional['LocaleResolver'] = None):
        self.paper = paper

        self.default_researches: Dict[str, Research] = ResearchRegistry.get_default_researches()
        self.custom_researches: Dict[str, Research] = {}
        self.helpers: Dict[str, Callable] = {}
        self.config: Dict[str, Any] = {}
        self.research_data: Dict[str, Any] = {}

        if locale_resolver is not None:
            resources = locale_resolver.resolve(paper.locale)
            if resources:
                self._apply_locale_resources(resources)
            else:
                logger.debug("No locale resources for '%s'", paper.locale)

    def _apply_locale_resources(self, resources: 'LocaleResources') -> None:
        """Registers the language specific word lists and helpers."""
        if resources.function_words:
            self.add_config("function_words", list(resources.function_words))
        for name, helper in resources.helpers.items():
            self.add_helper(name, helper)

    # --- Registration ---

    @staticmethod
    def _validate_callable(name: str, fn: Any, kind: str) -> None:
        if not name:
            raise MissingArgument(f"A {kind} name must be provided.")
        if not callable(fn):
            raise InvalidType(f"The {kind} '{name}' must be callable, got {type(fn).__name__}.")

    def add_research(self, name: str, research: Research) -> None:
        """Adds a custom research. A custom research overrides a default one with the same name."""
        self._validate_callable(name, research, "research")
        self.custom_researches[name] = research

    def add_helper(self, name: str, helper: Callable) -> None:
        """Adds a helper that researches can look up through `get_helper`."""
        self._validate_callable(name, helper, "helper")
        self.helpers[name] = helper

    def add_config(self, name: str, value: Any = None) -> None:
        """
        Stores a named configuration value, replacing any previous value.

        Raises:
            MissingArgument: If the name is empty, the value is omitted or the
                             value is an empty collection.
        """
        if not name:
            raise MissingArgument("A config name must be provided.")
        if value is None:
            raise MissingArgument(f"No value given for config '{name}'.")
        if hasattr(value, "__len__") and len(value) == 0:
            raise MissingArgument(f"The config '{name}' cannot be empty.")
        self.config[name] = value

    def add_research_data(self, name: str, data: Any) -> None:
        """Stores precomputed data for a research, e.g. values measured by the host."""
        if not name:
            raise MissingArgument("A research data name must be provided.")
        if name in self.research_data:
            logger.debug("Research data '%s' is replaced.", name)
        self.research_data[name] = data

    # --- Lookup ---

    def has_research(self, name: str) -> bool:
        return name in self.custom_researches or name in self.default_researches

    def has_helper(self, name: str) -> bool:
        return name in self.helpers

    def has_config(self, name: str) -> bool:
        return name in self.config

    def get_helper(self, name: str) -> Optional[Callable]:
        return self.helpers.get(name)

    def get_config(self, name: str) -> Optional[Any]:
        """Returns the config value, or None when it was never added."""
        return self.config.get(name)

    def get_data(self, name: str) -> Optional[Any]:
        """Returns the research data, or None when it was never added."""
        return self.research_data.get(name)

    def get_available_researches(self) -> Dict[str, Research]:
        """All researches by name; custom researches win over defaults."""
        return {**self.default_researches, **self.custom_researches}

    def get_available_helpers(self) -> Dict[str, Callable]:
        return dict(self.helpers)

    def get_available_config(self) -> Dict[str, Any]:
        return dict(self.config)

    # --- Dispatch ---

    def get_research(self, name: str) -> Any:
        """
        Runs a research against this researcher's paper.

        Args:
            name (str): The name of the research.

        Returns:
            Any: The research result, or None if no research with this name exists.

        Raises:
            MissingArgument: If no name is given.
        """
        if not name:
            raise MissingArgument("Research name cannot be empty.")

        research = self.custom_researches.get(name)
        if research is None:
            research = self.default_researches.get(name)
        if research is None:
            logger.debug("Unknown research requested: %s", name)
            return None

        return research(self.paper, self)

    def __repr__(self) -> str:
        return (
            f"<Researcher researches={len(self.get_available_researches())} "
            f"helpers={len(self.helpers)} config={len(self.config)}>"
        )
