"""Typing-centric domain modules."""

from jsimports.typing.enums import MatchKind
from jsimports.typing.models import FileImports, RawCapture, ScanReport

__all__ = [
    "FileImports",
    "MatchKind",
    "RawCapture",
    "ScanReport",
]
