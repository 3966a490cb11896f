# src/researcher/utils/path_utils.py
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class PathUtils:
    """
    A central utility for reliably retrieving package paths.
    """

    @staticmethod
    def get_package_root() -> Path:
        """Returns the absolute path of the 'researcher' package directory."""
        return Path(__file__).resolve().parent.parent

    @staticmethod
    def get_settings_file() -> Path:
        """Returns the path to the bundled settings.json."""
        return PathUtils.get_package_root() / "settings.json"
