# src/researcher/engine/registry.py
import importlib
import pkgutil
import logging
from typing import Dict, List

from .core import ResearchDefinition, Research

logger = logging.getLogger(__name__)


class ResearchRegistry:
    """
    Central table of the built-in (default) researches.

    Dynamically discovers ResearchDefinition modules from the
    'researcher.engine.researches' package. The table is filled once and only
    read afterwards; every Researcher takes its own copy of it.
    """

    _definitions: Dict[str, ResearchDefinition] = {}
    _loaded: bool = False

    @classmethod
    def discover(cls) -> None:
        """
        Registers every module in 'researcher.engine.researches' that carries a
        `DEFINITION` attribute (instance of `ResearchDefinition`).
        """
        if cls._loaded:
            return

        try:
            import researcher.engine.researches as researches_pkg

            for _, name, _ in pkgutil.iter_modules(researches_pkg.__path__):
                full_name = f"researcher.engine.researches.{name}"
                try:
                    module = importlib.import_module(full_name)
                except ImportError as e:
                    logger.error(f"Error loading research module {name}: {e}")
                    continue

                defn = getattr(module, "DEFINITION", None)
                if isinstance(defn, ResearchDefinition):
                    cls._definitions[defn.name] = defn
                    logger.debug(f"Research loaded: {defn.name}")

            cls._check_requirements()
            cls._loaded = True
        except ImportError as e:
            logger.error(f"Could not find researches package: {e}")

    @classmethod
    def _check_requirements(cls) -> None:
        """Warns about researches that call researches which are not registered."""
        for defn in cls._definitions.values():
            missing = [req for req in defn.requires if req not in cls._definitions]
            if missing:
                logger.warning("Research '%s' requires unknown research(es): %s", defn.name, ", ".join(missing))

    @classmethod
    def get_default_researches(cls) -> Dict[str, Research]:
        """Returns a fresh name -> function mapping of all default researches."""
        cls.discover()
        return {name: defn.research for name, defn in cls._definitions.items()}

    @classmethod
    def get_definition(cls, name: str):
        cls.discover()
        return cls._definitions.get(name)

    @classmethod
    def get_all_names(cls) -> List[str]:
        cls.discover()
        return sorted(cls._definitions.keys())
