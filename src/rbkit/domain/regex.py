"""Regex values and the RegexConvertible capability.

Three kinds of value convert to a compiled :class:`Regex`:
- ``Regex`` itself (identity).
- ``str`` (literal text, escaped before compilation).
- ``Char`` (a single grapheme, widened to ``str`` first).

INVARIANT: every literal conversion goes through :func:`compile_literal`,
so string and character conversions can never diverge.
"""

from __future__ import annotations

import functools
import logging
import re
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

import regex as regex_lib

logger = logging.getLogger(__name__)

# One extended grapheme cluster (UAX #29).
_GRAPHEME = regex_lib.compile(r"\X")


class RegexSyntaxError(ValueError):
    """Raised when pattern syntax passed to :meth:`Regex.compile` is malformed."""

    def __init__(self, source: str, reason: str, pos: int | None = None) -> None:
        self.source = source
        self.reason = reason
        self.pos = pos
        where = f" at position {pos}" if pos is not None else ""
        super().__init__(f"Invalid regex {source!r}{where}: {reason}")


@runtime_checkable
class RegexConvertible(Protocol):
    """Anything that can present itself as a compiled :class:`Regex`."""

    @property
    def regex(self) -> Regex: ...


@dataclass(frozen=True)
class Regex:
    """An immutable compiled pattern.

    Equality and hashing use ``(source, flags)``. The compiled
    ``re.Pattern`` is always derived from them and never passed in.
    """

    source: str
    flags: int = 0
    pattern: re.Pattern[str] = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "pattern", _compile(self.source, self.flags))

    @classmethod
    def compile(cls, source: str, flags: int = 0) -> Regex:
        """Compile *source* as pattern syntax.

        Raises:
            RegexSyntaxError: If *source* is not a valid pattern.
        """
        return cls(source, flags)

    @classmethod
    def literal(cls, text: str) -> Regex:
        """Build a regex matching *text* literally."""
        return compile_literal(text)

    @property
    def regex(self) -> Regex:
        """An alias to self."""
        return self

    def match(self, text: str) -> re.Match[str] | None:
        """Match at the start of *text*."""
        return self.pattern.match(text)

    def search(self, text: str) -> re.Match[str] | None:
        """Find the first match anywhere in *text*."""
        return self.pattern.search(text)

    def fullmatch(self, text: str) -> re.Match[str] | None:
        """Match only if the whole of *text* matches."""
        return self.pattern.fullmatch(text)

    def findall(self, text: str) -> list[str]:
        """Return every whole match in *text*, ignoring groups."""
        return [m.group(0) for m in self.pattern.finditer(text)]

    def test(self, text: str) -> bool:
        """Return True if the pattern occurs anywhere in *text*."""
        return self.pattern.search(text) is not None


class Char(str):
    """A single user-perceived character (one extended grapheme cluster).

    Examples:
        >>> Char("a")
        'a'
        >>> Char("e\\u0301") == "e\\u0301"
        True
        >>> Char("\\r\\n") == "\\r\\n"
        True
    """

    __slots__ = ()

    def __new__(cls, value: str) -> Char:
        if not _is_single_grapheme(value):
            msg = f"Char requires exactly one grapheme, got {value!r}"
            raise ValueError(msg)
        return super().__new__(cls, value)

    @property
    def regex(self) -> Regex:
        """Returns a literal regex by first converting to string."""
        return compile_literal(str(self))


def _is_single_grapheme(value: str) -> bool:
    return _GRAPHEME.fullmatch(value) is not None


def _compile(source: str, flags: int) -> re.Pattern[str]:
    try:
        return re.compile(source, flags)
    except re.error as exc:
        logger.debug("Rejected regex source %r: %s", source, exc.msg)
        raise RegexSyntaxError(source, exc.msg, exc.pos) from exc


def compile_literal(text: str) -> Regex:
    """Compile *text* into a regex that matches it literally.

    This is the canonical literal entry point; it cannot fail.

    Examples:
        >>> compile_literal("a.b").test("a.b")
        True
        >>> compile_literal("a.b").test("axb")
        False
    """
    return Regex.compile(re.escape(text))


@functools.singledispatch
def to_regex(value: object) -> Regex:
    """Convert *value* to a :class:`Regex`.

    Accepts ``Regex``, ``Char``, ``str`` and any :class:`RegexConvertible`.
    Further types can be added with ``to_regex.register``.

    Raises:
        TypeError: If *value* has no registered conversion.
    """
    if isinstance(value, RegexConvertible):
        return value.regex
    msg = f"Cannot convert {type(value).__name__} to Regex"
    raise TypeError(msg)


@to_regex.register
def _(value: Regex) -> Regex:
    return value


@to_regex.register
def _(value: str) -> Regex:
    return compile_literal(value)


@to_regex.register
def _(value: Char) -> Regex:
    return value.regex
