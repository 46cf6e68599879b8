"""Lenient number parsing for command-line arguments."""

from __future__ import annotations

_WHITESPACE = " \t\n\r\v\f"
_SIGNS = "+-"


def _skip_whitespace(text: str) -> int:
    return len(text) - len(text.lstrip(_WHITESPACE))


def _read_sign(text: str, pos: int) -> tuple[int, int]:
    if pos < len(text) and text[pos] in _SIGNS:
        return (-1 if text[pos] == "-" else 1), pos + 1
    return 1, pos


def _leading_digits(text: str, pos: int) -> str:
    end = pos
    while end < len(text) and "0" <= text[end] <= "9":
        end += 1
    return text[pos:end]


def parse_int(text: str) -> int:
    """Parse a leading decimal integer; stops at the first non-digit, 0 if none."""
    sign, pos = _read_sign(text, _skip_whitespace(text))
    digits = _leading_digits(text, pos)
    return sign * int(digits) if digits else 0


def _validate_base(base: str) -> None:
    if len(base) < 2:
        raise ValueError("base must have at least two symbols")
    if any(ch in _SIGNS for ch in base):
        raise ValueError("base must not contain sign characters")
    if len(set(base)) != len(base):
        raise ValueError("base must not repeat a symbol")


def parse_int_base(text: str, base: str) -> int:
    """Parse an integer written with the symbols of ``base``.

    Leading whitespace and one leading sign are accepted; a later sign ends
    the number. Any other character outside the base is an error.
    """
    _validate_base(base)
    if not text:
        raise ValueError("empty number")
    start = _skip_whitespace(text)
    bad = [ch for ch in text[start:] if ch not in base and ch not in _SIGNS]
    if bad:
        raise ValueError(f"invalid digit {bad[0]!r} for base {base!r}")
    sign, pos = _read_sign(text, start)
    radix = len(base)
    value = 0
    for ch in text[pos:]:
        if ch in _SIGNS:
            break
        value = value * radix + base.index(ch)
    return sign * value


def parse_float(text: str) -> float:
    """Parse a leading decimal number with an optional fraction; 0.0 if none."""
    sign, pos = _read_sign(text, _skip_whitespace(text))
    result = 0.0
    for ch in _leading_digits(text, pos):
        result = result * 10.0 + (ord(ch) - ord("0"))
    pos += len(_leading_digits(text, pos))
    fraction = 0.0
    if pos < len(text) and text[pos] == ".":
        decimal = 0.1
        for ch in _leading_digits(text, pos + 1):
            fraction += (ord(ch) - ord("0")) * decimal
            decimal *= 0.1
    return result * sign + fraction * sign