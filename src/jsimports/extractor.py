"""Module-reference extraction over JavaScript/TypeScript source text."""

from __future__ import annotations

import os
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING

from jsimports.exceptions import ExtractionError, UnquoteError
from jsimports.logging import get_logger
from jsimports.patterns import iter_matches
from jsimports.typing.models import FileImports, ScanReport
from jsimports.unquote import unquote_literal

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from jsimports.settings import Settings

logger = get_logger(__name__)


def _decode_source(source: bytes | str, encoding: str) -> str:
    if isinstance(source, str):
        return source
    return source.decode(encoding, errors="surrogateescape")


def extract(source: bytes | str, *, encoding: str = "utf-8") -> list[str]:
    """Return the module paths referenced by a source file.

    Static `import`/`export` specifiers keep their case; paths named by
    `require`, `require.resolve` and the jest helpers are lower-cased. The
    result is sorted and keeps duplicates.

    Args:
        source (bytes | str): File contents.
        encoding (str): Encoding used when `source` is bytes.

    Raises:
        ExtractionError: If a captured literal cannot be unquoted. No partial
            result is returned.

    Returns:
        list[str]: Module paths in ascending order.
    """
    imports: list[str] = []
    for capture in iter_matches(_decode_source(source, encoding)):
        if capture is None:
            continue
        try:
            value = unquote_literal(capture.text)
        except UnquoteError as exc:
            raise ExtractionError(literal=exc.literal, reason=exc.reason) from exc
        imports.append(value if capture.kind.preserves_case else value.lower())

    imports.sort()
    logger.debug("Module references extracted", extra={"count": len(imports)})
    return imports


def extract_file(path: Path, *, encoding: str = "utf-8") -> list[str]:
    """Read a source file and extract its module paths.

    Args:
        path (Path): Source file.
        encoding (str): Source file encoding.

    Raises:
        ExtractionError: If a literal in the file cannot be unquoted; the error
            carries the file path.

    Returns:
        list[str]: Module paths in ascending order.
    """
    try:
        return extract(path.read_bytes(), encoding=encoding)
    except ExtractionError as exc:
        raise replace(exc, path=str(path)) from exc.__cause__


def iter_source_files(
    paths: Iterable[Path],
    *,
    extensions: Iterable[str],
    excluded_dirs: Iterable[str] = (),
) -> Iterator[Path]:
    """Yield source files below the given paths.

    Files passed explicitly are always yielded; directories are walked in a
    stable order and filtered by suffix.

    Args:
        paths (Iterable[Path]): Files or directories.
        extensions (Iterable[str]): Accepted lower-case suffixes, with dot.
        excluded_dirs (Iterable[str]): Directory names never descended into.

    Yields:
        Path: Source file path.
    """
    suffixes = frozenset(extensions)
    skipped = frozenset(excluded_dirs)
    for root in paths:
        if not root.is_dir():
            yield root
            continue
        for current, dirnames, filenames in os.walk(root):
            dirnames[:] = sorted(name for name in dirnames if name not in skipped)
            for filename in sorted(filenames):
                candidate = Path(current) / filename
                if candidate.suffix.lower() in suffixes:
                    yield candidate


def scan_paths(paths: Iterable[Path], settings: Settings) -> ScanReport:
    """Extract module paths from every source file under `paths`.

    Args:
        paths (Iterable[Path]): Files or directories.
        settings (Settings): Runtime settings.

    Raises:
        ExtractionError: On the first failing file when `settings.fail_fast` is set.

    Returns:
        ScanReport: Per-file results.
    """
    report = ScanReport()
    files = iter_source_files(paths, extensions=settings.extensions, excluded_dirs=settings.excluded_dirs)
    for path in files:
        try:
            imports = extract_file(path, encoding=settings.source_encoding)
        except ExtractionError as exc:
            if settings.fail_fast:
                raise
            logger.warning(
                "Skipping file with malformed module reference",
                extra={"path": str(path), "literal": exc.literal, "reason": exc.reason},
            )
            report.files.append(FileImports(path=str(path), error=str(exc)))
            continue
        logger.debug("File scanned", extra={"path": str(path), "imports": len(imports)})
        report.files.append(FileImports(path=str(path), imports=imports))
    return report


def persist_report(report: ScanReport, path: Path) -> None:
    """Persist scan report as JSON.

    Args:
        report (ScanReport): Scan result payload.
        path (Path): Output path.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(report.model_dump_json(indent=2), encoding="utf-8")
