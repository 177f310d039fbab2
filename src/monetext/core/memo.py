"""Build-once, read-many cache for per-locale derived data.

Used for the currency-adjusted number rules of each LocaleContext and for
each registry's per-locale symbol index. Entries are never invalidated:
locale and registry data are immutable for the lifetime of the process.

Reads are plain dict lookups with no lock. Writers build the value outside
any lock, then publish a copied dict under a lock. When two threads race
on the same key both may build, but only the first published value is
kept and every caller receives that one.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable, Hashable
from threading import Lock
from typing import Generic, TypeVar

__all__ = ["BuildOnceCache"]

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class BuildOnceCache(Generic[K, V]):
    """Copy-on-write memo table keyed by locale identity.

    Example:
        >>> cache: BuildOnceCache[str, int] = BuildOnceCache()
        >>> cache.get_or_build("en_US", lambda: 42)
        42
        >>> cache.get_or_build("en_US", lambda: 0)
        42
    """

    __slots__ = ("_entries", "_write_lock")

    def __init__(self) -> None:
        self._entries: dict[K, V] = {}
        self._write_lock = Lock()

    def get(self, key: K) -> V | None:
        """Return the published value for key, or None."""
        return self._entries.get(key)

    def get_or_build(self, key: K, factory: Callable[[], V]) -> V:
        """Return the value for key, building and publishing it on first use.

        Args:
            key: Cache key (a LocaleContext or locale code)
            factory: Pure, deterministic builder for the value

        Returns:
            The first value published for key
        """
        entries = self._entries
        if key in entries:
            return entries[key]

        value = factory()

        with self._write_lock:
            entries = self._entries
            if key in entries:
                return entries[key]
            published = dict(entries)
            published[key] = value
            self._entries = published
        return value

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
