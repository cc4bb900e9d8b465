"""Package exceptions."""

from __future__ import annotations

from dataclasses import dataclass


class PackageError(Exception):
    """Root exception for the package."""


@dataclass(frozen=True)
class SettingsError(PackageError):
    """Raised when settings cannot be loaded or validated."""

    message: str = "Failed to load settings"
    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.message}: {self.exc}" if self.exc else self.message


@dataclass(frozen=True)
class UnquoteError(PackageError):
    """Raised when a captured string literal cannot be decoded."""

    literal: str
    reason: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Cannot unquote string literal {self.literal}: {self.reason}"


@dataclass(frozen=True)
class ExtractionError(PackageError):
    """Raised when a module reference in a source file cannot be extracted."""

    literal: str
    reason: str
    path: str | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        location = f" in {self.path}" if self.path else ""
        return f"Unquoting string literal {self.literal}{location} failed: {self.reason}"
