# src/researcher/engine/models.py
from collections.abc import Mapping
from typing import Dict, Iterator
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class FrozenAttributes(Mapping):
    """Read-only mapping for Paper metadata; item assignment raises TypeError."""

    def __init__(self, data=None):
        self._data: Dict[str, str] = dict(data or {})

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __hash__(self) -> int:
        return hash(frozenset(self._data.items()))

    def __repr__(self) -> str:
        return f"FrozenAttributes({self._data!r})"


class Paper(BaseModel):
    """
    The document under analysis.

    Holds the raw text/markup together with the focus keyword, the locale and
    open-ended metadata (title, description, permalink, ...). A Paper is frozen:
    researches receive it read-only for the whole analysis pass, attributes
    included.
    """
    model_config = ConfigDict(frozen=True)

    text: str = ""
    keyword: str = ""
    locale: str = "en_US"
    attributes: Mapping[str, str] = Field(default_factory=FrozenAttributes)

    @field_validator('attributes', mode='before')
    @classmethod
    def copy_attributes(cls, v):
        """Takes a private copy so later changes to the caller's dict do not leak in."""
        return dict(v) if v else {}

    @field_validator('attributes', mode='after')
    @classmethod
    def freeze_attributes(cls, v):
        return FrozenAttributes(v)

    @field_serializer('attributes')
    def serialize_attributes(self, v) -> Dict[str, str]:
        return dict(v)

    def has_text(self) -> bool:
        return bool(self.text)

    def has_keyword(self) -> bool:
        return bool(self.keyword)

    @property
    def language(self) -> str:
        """Language part of the locale ('nl_NL' -> 'nl')."""
        return self.locale.split("_")[0].lower() if self.locale else ""

    def get_attribute(self, name: str, default: str = "") -> str:
        return self.attributes.get(name, default)

    @property
    def title(self) -> str:
        return self.get_attribute("title")

    @property
    def description(self) -> str:
        return self.get_attribute("description")

    @property
    def permalink(self) -> str:
        # Older callers only pass 'url'
        return self.get_attribute("permalink") or self.get_attribute("url")
