# src/researcher/errors.py


class ResearcherError(Exception):
    """Base class for misuse of the research engine."""


class MissingArgument(ResearcherError, ValueError):
    """Raised when a required name or value is omitted or empty."""


class InvalidType(ResearcherError, TypeError):
    """Raised when a value is not callable where a research or helper is expected."""
