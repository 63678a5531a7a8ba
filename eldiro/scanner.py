"""Text-scanning primitives for the Eldiro parser.

Every function here takes the remaining input as a plain string and
returns the unconsumed remainder first, followed by whatever was
extracted. Nothing is mutated; a failed match raises `ParseError` and
leaves the caller free to try another alternative at the same position.
All higher-level parsers in `eldiro.parser` are built from these.
"""

from __future__ import annotations

from typing import Callable, List, Tuple, TypeVar

from .errors import ParseError

T = TypeVar('T')

WHITESPACE = (' ', '\n', '\t')


def take_while(accept: Callable[[str], bool], s: str) -> Tuple[str, str]:
    end = 0
    for c in s:
        if not accept(c):
            break
        end += 1
    return s[end:], s[:end]


def take_while_required(accept: Callable[[str], bool], s: str, error_message: str) -> Tuple[str, str]:
    remainder, extracted = take_while(accept, s)
    if not extracted:
        raise ParseError(error_message)
    return remainder, extracted


def tag(literal: str, s: str) -> str:
    if s.startswith(literal):
        return s[len(literal):]
    raise ParseError(f'expected {literal}')


def _is_ascii_digit(c: str) -> bool:
    return '0' <= c <= '9'


def _is_ascii_alpha(c: str) -> bool:
    return c.isascii() and c.isalpha()


def _is_ascii_alnum(c: str) -> bool:
    return c.isascii() and c.isalnum()


def extract_digits(s: str) -> Tuple[str, str]:
    return take_while_required(_is_ascii_digit, s, 'expected digits')


def extract_whitespace(s: str) -> Tuple[str, str]:
    return take_while(lambda c: c in WHITESPACE, s)


def extract_whitespace_required(s: str) -> Tuple[str, str]:
    return take_while_required(lambda c: c in WHITESPACE, s, 'expected a whitespace')


def extract_spaces(s: str) -> Tuple[str, str]:
    """Skip plain spaces only; newlines and tabs are left in place."""
    return take_while(lambda c: c == ' ', s)


def extract_identifier(s: str) -> Tuple[str, str]:
    # The first character decides; digits are only allowed after it.
    if not s or not _is_ascii_alpha(s[0]):
        raise ParseError('expected identifier')
    return take_while(_is_ascii_alnum, s)


def sequence(
    parser: Callable[[str], Tuple[str, T]],
    separator: Callable[[str], Tuple[str, str]],
    s: str,
) -> Tuple[str, List[T]]:
    """Collect items from `parser` until it fails, skipping `separator` after each one.

    A failure of `parser` ends the sequence without error, so the result
    may be empty. Errors other than `ParseError` still propagate.
    """
    items: List[T] = []
    while True:
        try:
            s, item = parser(s)
        except ParseError:
            break
        items.append(item)
        s, _ = separator(s)
    return s, items


def sequence_required(
    parser: Callable[[str], Tuple[str, T]],
    separator: Callable[[str], Tuple[str, str]],
    s: str,
) -> Tuple[str, List[T]]:
    s, items = sequence(parser, separator, s)
    if not items:
        raise ParseError('expected a sequence with more than one item')
    return s, items
