# src/researcher/managers/config_manager.py
import json
import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, ValidationError, field_validator

from researcher.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)


class _Section(BaseModel):
    model_config = ConfigDict(extra='allow')


class DebugSettings(_Section):
    level: str = "WARNING"

    @field_validator('level')
    @classmethod
    def known_level(cls, v: str) -> str:
        v = v.upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"unknown log level '{v}'")
        return v


class LongCenterAlignedSettings(_Section):
    max_characters: PositiveInt = 50
    marker_class: str = "has-text-align-center"

    @field_validator('marker_class')
    @classmethod
    def single_class_token(cls, v: str) -> str:
        v = v.strip()
        if not v or len(v.split()) != 1:
            raise ValueError("must be a single class name")
        return v


class WordCountSettings(_Section):
    character_languages: List[str] = ["ja", "zh"]


class SubheadingSettings(_Section):
    tags: List[str] = ["h2", "h3"]


class ResearchSettings(_Section):
    long_center_aligned_texts: LongCenterAlignedSettings = Field(default_factory=LongCenterAlignedSettings)
    word_count_in_text: WordCountSettings = Field(default_factory=WordCountSettings)
    subheading_text_lengths: SubheadingSettings = Field(default_factory=SubheadingSettings)


class AnalysisSettings(_Section):
    workers: PositiveInt = 4


class Settings(_Section):
    """Schema of settings.json. Missing keys take the defaults below."""
    debug: DebugSettings = Field(default_factory=DebugSettings)
    researches: ResearchSettings = Field(default_factory=ResearchSettings)
    analysis: AnalysisSettings = Field(default_factory=AnalysisSettings)


def _drop_path(data: Dict[str, Any], loc) -> None:
    """Removes the value at `loc` (up to the first list index) from nested dicts."""
    keys = []
    for part in loc:
        if not isinstance(part, str):
            break
        keys.append(part)

    d = data
    for key in keys[:-1]:
        d = d.get(key)
        if not isinstance(d, dict):
            return
    if keys:
        d.pop(keys[-1], None)


class ConfigManager:
    """
    A singleton holding the package settings (thresholds, marker classes,
    worker counts). settings.json is validated against `Settings` when loaded:
    invalid values are logged and replaced by their defaults, so researches can
    trust what `get_nested` returns. Per-document overrides belong in
    Researcher.add_config.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        self._config: Dict[str, Any] = {}
        self.reset()
        logger.debug("ConfigManager initialized.")

    def get_all(self) -> Dict[str, Any]:
        """Returns the entire current configuration dictionary."""
        return self._config

    def get_nested(self, key_path: str, default: Optional[Any] = None) -> Any:
        """
        Safely retrieves a nested value from the configuration.
        e.g., 'researches.long_center_aligned_texts.max_characters'.
        """
        value = self._config
        for key in key_path.split('.'):
            if isinstance(value, dict):
                value = value.get(key)
            else:
                return default
        return value if value is not None else default

    def reset(self):
        """(Re)loads and validates settings.json. A missing or unreadable file gives the defaults."""
        self._config = self._validate(self._read()).model_dump()

    @staticmethod
    def _read() -> Dict[str, Any]:
        config_path = PathUtils.get_settings_file()
        if not config_path.exists():
            logger.warning("settings.json not found at %s. Using defaults.", config_path)
            return {}
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load settings.json: %s", e, exc_info=True)
            return {}
        if not isinstance(raw, dict):
            logger.error("settings.json must contain an object, got %s. Using defaults.", type(raw).__name__)
            return {}
        logger.debug("Configuration has been (re)loaded from settings.json.")
        return raw

    @staticmethod
    def _validate(raw: Dict[str, Any]) -> Settings:
        try:
            return Settings.model_validate(raw)
        except ValidationError as e:
            for error in e.errors():
                path = ".".join(str(part) for part in error["loc"])
                logger.warning("Ignoring invalid setting '%s': %s", path, error["msg"])
                _drop_path(raw, error["loc"])

        try:
            return Settings.model_validate(raw)
        except ValidationError as e:
            logger.error("settings.json is still invalid after dropping bad values: %s", e)
            return Settings()


# The global singleton instance the package uses.
config_manager = ConfigManager()
