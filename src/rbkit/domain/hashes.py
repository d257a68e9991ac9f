"""Hash combinators — merge with conflict resolution, replace, clear, delete.

Non-destructive operations (``merge``, ``update``) return a new mapping.
In-place operations (``merge_in_place``, ``update_in_place``, ``clear``,
``replace``) mutate the receiver and return it for chaining.

None of these operations fail for well-typed inputs: key collisions are
resolved silently, either by the caller's resolver or right-hand precedence.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, MutableMapping
from typing import Any, TypeVar

K = TypeVar("K")
V = TypeVar("V")
M = TypeVar("M", bound=MutableMapping[Any, Any])

Resolver = Callable[[K, V, V], V]


def merge(
    this: Mapping[K, V],
    other: Mapping[K, V],
    resolver: Resolver[K, V] | None = None,
) -> dict[K, V]:
    """Return a new mapping with the contents of *this* and *other*.

    Without a *resolver*, the value for a key present in both is that of
    *other*. Otherwise it is ``resolver(key, this_value, other_value)``.
    Neither argument is mutated.

    Examples:
        >>> h1 = {"a": 100, "b": 200}
        >>> h2 = {"b": 254, "c": 300}
        >>> merge(h1, h2)
        {'a': 100, 'b': 254, 'c': 300}
        >>> merge(h1, h2, lambda key, old, new: new - old)
        {'a': 100, 'b': 54, 'c': 300}
        >>> h1
        {'a': 100, 'b': 200}
    """
    result = dict(this)
    for key, value in other.items():
        if resolver is not None and key in result:
            result[key] = resolver(key, result[key], value)
        else:
            result[key] = value
    return result


def update(
    this: Mapping[K, V],
    other: Mapping[K, V],
    resolver: Resolver[K, V] | None = None,
) -> dict[K, V]:
    """An alias to :func:`merge`."""
    return merge(this, other, resolver)


def merge_in_place(
    this: M,
    other: Mapping[Any, Any],
    resolver: Resolver[Any, Any] | None = None,
) -> M:
    """A mutating version of :func:`merge`; returns *this*.

    The merged result is computed before *this* is touched, so a resolver
    that raises leaves *this* unchanged.
    """
    merged = merge(this, other, resolver)
    return _assign(this, merged)


def update_in_place(
    this: M,
    other: Mapping[Any, Any],
    resolver: Resolver[Any, Any] | None = None,
) -> M:
    """An alias to :func:`merge_in_place`."""
    return merge_in_place(this, other, resolver)


def clear(this: M) -> M:
    """Remove all key-value pairs from *this* and return it."""
    this.clear()
    return this


def delete(this: MutableMapping[K, V], key: K, default: V | None = None) -> V | None:
    """Remove *key* from *this* and return its value.

    Returns *default* (None unless given) if *key* is absent; the mapping
    is left unchanged in that case.

    Examples:
        >>> h = {"a": 100, "b": 200}
        >>> delete(h, "a")
        100
        >>> h
        {'b': 200}
        >>> delete(h, "z") is None
        True
    """
    return this.pop(key, default)


def replace(this: M, other: Mapping[Any, Any]) -> M:
    """Replace the contents of *this* with a copy of *other*'s entries.

    The receiver never aliases *other*: adding or removing keys on either
    afterwards does not affect the other. Values themselves are shared.
    """
    return _assign(this, dict(other))


def _assign(this: M, entries: Mapping[Any, Any]) -> M:
    # entries must already be detached from this (clear() would empty it otherwise)
    this.clear()
    this.update(entries)
    return this
