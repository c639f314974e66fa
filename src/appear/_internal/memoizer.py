"""Unbounded result cache."""

from __future__ import annotations

import logging
import typing as t

if t.TYPE_CHECKING:
    from collections.abc import Callable, Hashable

logger = logging.getLogger(__name__)

_T = t.TypeVar("_T")


class Memoizer:
    """Cache the result of a callable per key, forever.

    There is no eviction and no invalidation, entries live as long as the
    memoizer does. Not thread safe.

    >>> memo = Memoizer()
    >>> calls = []
    >>> def fetch():
    ...     calls.append(1)
    ...     return ["%1", "%2"]
    >>> memo(("list-panes", "Pane"), fetch)
    ['%1', '%2']
    >>> memo(("list-panes", "Pane"), fetch)
    ['%1', '%2']
    >>> len(calls)
    1
    """

    def __init__(self) -> None:
        self._cache: dict[Hashable, t.Any] = {}

    def __call__(self, key: Hashable, fn: Callable[[], _T]) -> _T:
        if key in self._cache:
            logger.debug(f"memo hit for {key!r}")
            return t.cast("_T", self._cache[key])
        result = fn()
        self._cache[key] = result
        return result

    def __contains__(self, key: Hashable) -> bool:
        return key in self._cache

    def __len__(self) -> int:
        return len(self._cache)
