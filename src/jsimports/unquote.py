"""Decoding of quoted module-path literals.

Captured literals keep their delimiting quotes. Inside the body either quote
character may appear unescaped and is kept as-is; backslash escapes follow the
usual string-literal conventions.
"""

from __future__ import annotations

from jsimports.exceptions import UnquoteError

_QUOTES = frozenset({"'", '"'})
_OCTAL_DIGITS = frozenset("01234567")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_SIMPLE_ESCAPES = {
    "\\": "\\",
    "'": "'",
    '"': '"',
    "/": "/",
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
}
_MAX_CODE_POINT = 0x10FFFF
_SURROGATES = range(0xD800, 0xE000)


def unquote_literal(literal: str) -> str:
    """Return the string value represented by a quoted literal.

    Args:
        literal (str): Raw literal, first and last characters being its quotes.

    Raises:
        UnquoteError: If the literal is not enclosed in matching quotes, spans
            several lines or holds a malformed escape sequence.

    Returns:
        str: Decoded value.
    """
    if len(literal) < 2 or literal[0] not in _QUOTES or literal[-1] != literal[0]:  # noqa: PLR2004
        raise UnquoteError(literal=literal, reason="not enclosed in matching quotes")

    body = literal[1:-1]
    decoded: list[str] = []
    index = 0
    while index < len(body):
        char = body[index]
        if char == "\n":
            raise UnquoteError(literal=literal, reason="newline in string literal")
        if char != "\\":
            decoded.append(char)
            index += 1
            continue
        value, index = _decode_escape(literal, body, index + 1)
        decoded.append(value)
    return "".join(decoded)


def _decode_escape(literal: str, body: str, index: int) -> tuple[str, int]:
    """Decode the escape sequence whose code starts at `index`.

    Returns:
        tuple[str, int]: Decoded character and the index following the sequence.
    """
    if index >= len(body):
        raise UnquoteError(literal=literal, reason="unterminated escape sequence")

    code = body[index]
    if code in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[code], index + 1
    if code in _OCTAL_DIGITS:
        digits = body[index : index + 3]
        if len(digits) == 3 and _OCTAL_DIGITS.issuperset(digits):  # noqa: PLR2004
            value = int(digits, 8)
            if value > 0o377:  # noqa: PLR2004
                raise UnquoteError(literal=literal, reason=f"octal escape \\{digits} out of range")
            return chr(value), index + 3
        if code == "0":
            return "\0", index + 1
        raise UnquoteError(literal=literal, reason=f"invalid octal escape \\{digits}")
    if code == "x":
        return _fixed_hex_escape(literal, body, index + 1, 2)
    if code == "U":
        return _fixed_hex_escape(literal, body, index + 1, 8)
    if code == "u":
        if body.startswith("{", index + 1):
            close = body.find("}", index + 2)
            if close == -1:
                raise UnquoteError(literal=literal, reason="unterminated \\u{...} escape")
            return _code_point(literal, body[index + 2 : close]), close + 1
        return _fixed_hex_escape(literal, body, index + 1, 4)
    raise UnquoteError(literal=literal, reason=f"invalid escape sequence \\{code}")


def _fixed_hex_escape(literal: str, body: str, index: int, width: int) -> tuple[str, int]:
    digits = body[index : index + width]
    if len(digits) != width:
        raise UnquoteError(literal=literal, reason=f"expected {width} hex digits, got '{digits}'")
    return _code_point(literal, digits), index + width


def _code_point(literal: str, digits: str) -> str:
    if not digits or not _HEX_DIGITS.issuperset(digits):
        raise UnquoteError(literal=literal, reason=f"invalid hex digits '{digits}'")
    value = int(digits, 16)
    if value > _MAX_CODE_POINT or value in _SURROGATES:
        raise UnquoteError(literal=literal, reason=f"invalid code point U+{value:X}")
    return chr(value)
