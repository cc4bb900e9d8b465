"""Compiled pattern recognizing the constructs that introduce a module dependency.

All seven alternatives are joined into one multi-line pattern and scanned
left to right; the first alternative matching at a line start wins. Each
alternative owns exactly one named group, named after its `MatchKind` value,
holding the quoted literal with its delimiters.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import TYPE_CHECKING

from jsimports.typing.enums import MatchKind
from jsimports.typing.models import RawCapture

if TYPE_CHECKING:
    from collections.abc import Iterator

# The body may contain either quote unescaped; the greedy run stops at the last
# delimiter on the line. Escaped delimiters are left to the unquoter.
STRING_LITERAL = "'.*'|\".*\""

_CONST_PREFIX = r"(?:const .+ = )?"


def _alternatives() -> dict[MatchKind, str]:
    """Return the pattern alternative for each match kind, in priority order."""
    lit = STRING_LITERAL
    return {
        MatchKind.STATIC_IMPORT: rf"^import\s(?:[\s\S]+?from )??(?P<{MatchKind.STATIC_IMPORT}>{lit}).*?",
        MatchKind.REQUIRE: rf"^\s*?{_CONST_PREFIX}require\((?P<{MatchKind.REQUIRE}>{lit})\).*",
        MatchKind.STATIC_EXPORT: rf"^export\s(?:[\s\S]+?from )??(?P<{MatchKind.STATIC_EXPORT}>{lit}).*?",
        # The factory argument is not captured; a call without a literal still
        # consumes the line start without producing a capture.
        MatchKind.JEST_MOCK: rf"^\s*?{_CONST_PREFIX}jest\.mock\((?P<{MatchKind.JEST_MOCK}>{lit})?,?",
        MatchKind.JEST_REQUIRE_ACTUAL: (
            rf"^\s*?(?:return )?jest\.requireActual\((?P<{MatchKind.JEST_REQUIRE_ACTUAL}>{lit}).*?"
        ),
        MatchKind.REQUIRE_RESOLVE: (
            rf"^\s*?{_CONST_PREFIX}require\.resolve\((?P<{MatchKind.REQUIRE_RESOLVE}>{lit})\).*"
        ),
        MatchKind.JEST_CREATE_MOCK_FROM_MODULE: (
            rf"^\s*?{_CONST_PREFIX}jest\.createMockFromModule\("
            rf"(?P<{MatchKind.JEST_CREATE_MOCK_FROM_MODULE}>{lit})\).*"
        ),
    }


@lru_cache(maxsize=1)
def import_pattern() -> re.Pattern[str]:
    """Return the process-wide compiled import pattern.

    Returns:
        re.Pattern[str]: Pattern joining every alternative, compiled once.
    """
    return re.compile("|".join(_alternatives().values()), re.MULTILINE)


def iter_matches(source: str) -> Iterator[RawCapture | None]:
    """Scan source text for non-overlapping import constructs.

    Args:
        source (str): Decoded source text.

    Yields:
        RawCapture | None: Capture of the alternative that fired, or None when
        the match carries no literal.
    """
    for match in import_pattern().finditer(source):
        group = match.lastgroup
        if group is None:
            yield None
            continue
        start, end = match.span(group)
        yield RawCapture(kind=MatchKind(group), start=start, end=end, text=match.group(group))


def iter_captures(source: str) -> Iterator[RawCapture]:
    """Yield only the matches that captured a quoted literal.

    Args:
        source (str): Decoded source text.

    Yields:
        RawCapture: Captured literal with its match kind.
    """
    for capture in iter_matches(source):
        if capture is not None:
            yield capture
