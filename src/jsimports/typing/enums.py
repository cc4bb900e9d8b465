"""Project enums."""

from __future__ import annotations

from enum import StrEnum


class MatchKind(StrEnum):
    """Syntactic form that introduced a module reference.

    Values double as the named groups of the compiled import pattern.
    """

    STATIC_IMPORT = "static_import"
    REQUIRE = "require"
    STATIC_EXPORT = "static_export"
    JEST_MOCK = "jest_mock"
    JEST_REQUIRE_ACTUAL = "jest_require_actual"
    REQUIRE_RESOLVE = "require_resolve"
    JEST_CREATE_MOCK_FROM_MODULE = "jest_create_mock_from_module"

    @property
    def preserves_case(self) -> bool:
        """Return whether the module path keeps its original case.

        ES module specifiers are case-sensitive; the CommonJS and jest forms
        are lower-cased for the build-graph consumer.
        """
        return self in {MatchKind.STATIC_IMPORT, MatchKind.STATIC_EXPORT}
