"""UrlCollection — ordered container of sitemap entries.

Entries are identified by their location.  Two insertion policies keep
that identity unique:

- :meth:`UrlCollection.add_if_absent` drops duplicates (sitemap URLs)
- :meth:`UrlCollection.add_or_update` replaces in place (index children)

:meth:`UrlCollection.add` skips the check and is only used when the caller
already guarantees uniqueness, e.g. when rebuilding chunks.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from sitemapkit.models.entry import UrlEntry


def _location_of(value: UrlEntry | str) -> str:
    return value.location if isinstance(value, UrlEntry) else value


class UrlCollection:
    """Insertion-ordered sequence of :class:`UrlEntry`.

    Args:
        entries: Initial entries, taken as-is (no deduplication).

    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[UrlEntry] = ()) -> None:
        self._entries: list[UrlEntry] = list(entries)

    def add(self, entry: UrlEntry) -> None:
        """Append *entry* unconditionally."""
        self._entries.append(entry)

    def add_if_absent(self, entry: UrlEntry) -> bool:
        """Append *entry* unless its location is present.  Returns True if added."""
        if self.search(entry) is not None:
            return False
        self._entries.append(entry)
        return True

    def add_or_update(self, entry: UrlEntry) -> bool:
        """Replace the entry with the same location, or append.

        The replacement keeps the original position.

        Returns:
            True if *entry* was appended, False if it replaced an existing one.

        """
        index = self.search(entry)
        if index is None:
            self._entries.append(entry)
            return True
        self._entries[index] = entry
        return False

    def remove(self, entry: UrlEntry | str) -> bool:
        """Remove the first entry sharing *entry*'s location.  No-op if absent."""
        index = self.search(entry)
        if index is None:
            return False
        del self._entries[index]
        return True

    def search(self, entry: UrlEntry | str) -> int | None:
        """Return the position of the entry with the same location, or None."""
        location = _location_of(entry)
        for index, item in enumerate(self._entries):
            if item.location == location:
                return index
        return None

    def exists(self, entry: UrlEntry | str) -> bool:
        return self.search(entry) is not None

    def count(self) -> int:
        return len(self._entries)

    def first(self) -> UrlEntry | None:
        """The earliest remaining entry, or None when empty."""
        return self._entries[0] if self._entries else None

    def chunk(self, max_size: int) -> list[UrlCollection]:
        """Split into consecutive collections of at most *max_size* entries.

        Returns ``[self]`` when the collection already fits.  Otherwise each
        chunk is a new, independent collection; order is preserved and the
        chunk sizes sum to :meth:`count`.

        Raises:
            ValueError: If *max_size* is smaller than 1.

        """
        if max_size < 1:
            msg = f"Chunk size must be at least 1, got {max_size}"
            raise ValueError(msg)
        if len(self._entries) <= max_size:
            return [self]
        return [
            UrlCollection(self._entries[start:start + max_size])
            for start in range(0, len(self._entries), max_size)
        ]

    def locations(self) -> list[str]:
        return [entry.location for entry in self._entries]

    def __iter__(self) -> Iterator[UrlEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, (UrlEntry, str)):
            return False
        return self.search(item) is not None

    def __repr__(self) -> str:
        return f"UrlCollection({len(self._entries)} entries)"
