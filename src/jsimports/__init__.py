"""jsimports package."""

from jsimports.exceptions import (
    ExtractionError,
    PackageError,
    SettingsError,
    UnquoteError,
)
from jsimports.extractor import extract, extract_file, scan_paths
from jsimports.logging import configure_logging, get_logger
from jsimports.settings import Settings, get_settings
from jsimports.typing.enums import MatchKind
from jsimports.unquote import unquote_literal

__version__ = "0.1.0"

# Initialize package logger at import time via `get_logger`.
logger = get_logger("jsimports")

__all__ = [
    "ExtractionError",
    "MatchKind",
    "PackageError",
    "Settings",
    "SettingsError",
    "UnquoteError",
    "__version__",
    "configure_logging",
    "extract",
    "extract_file",
    "get_logger",
    "get_settings",
    "logger",
    "scan_paths",
    "unquote_literal",
]
