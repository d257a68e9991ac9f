"""rbkit — regex conversion and hash combinators."""

from rbkit.domain.hashes import (
    clear,
    delete,
    merge,
    merge_in_place,
    replace,
    update,
    update_in_place,
)
from rbkit.domain.regex import (
    Char,
    Regex,
    RegexConvertible,
    RegexSyntaxError,
    compile_literal,
    to_regex,
)

__all__ = [
    "Char",
    "Regex",
    "RegexConvertible",
    "RegexSyntaxError",
    "clear",
    "compile_literal",
    "delete",
    "merge",
    "merge_in_place",
    "replace",
    "to_regex",
    "update",
    "update_in_place",
]
