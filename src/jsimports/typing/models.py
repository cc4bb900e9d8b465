"""Capture and scan report models."""

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from jsimports.typing.enums import MatchKind


class RawCapture(BaseModel):
    """Quoted literal captured by one pattern alternative."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    kind: MatchKind
    start: int = Field(ge=0, description="Offset of the opening quote in the decoded source.")
    end: int = Field(ge=0, description="Offset just past the closing quote.")
    text: str = Field(description="Literal text including its delimiting quotes.")


class FileImports(BaseModel):
    """Module paths referenced by one source file."""

    model_config = ConfigDict(extra="forbid")

    path: str
    imports: list[str] = Field(default_factory=list)
    error: str | None = None

    @field_validator("path", "error")
    @classmethod
    def _escape_path_bytes(cls, value: str | None) -> str | None:
        """Escape undecodable bytes so the report stays valid UTF-8."""
        return None if value is None else _escape_undecodable(value)

    @field_validator("imports")
    @classmethod
    def _escape_import_bytes(cls, value: list[str]) -> list[str]:
        """Escape undecodable bytes kept from non-UTF-8 sources."""
        return [_escape_undecodable(entry) for entry in value]


class ScanReport(BaseModel):
    """Aggregated result of scanning a set of files."""

    model_config = ConfigDict(extra="forbid")

    files: list[FileImports] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def errors(self) -> int:
        """Return the number of files that failed extraction."""
        return sum(1 for entry in self.files if entry.error is not None)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def import_count(self) -> int:
        """Return the total number of module paths collected."""
        return sum(len(entry.imports) for entry in self.files)


def _escape_undecodable(value: str) -> str:
    # Lone surrogates come from `surrogateescape` decoding; render them as \xNN.
    return value.encode("utf-8", "surrogateescape").decode("utf-8", "backslashreplace")
