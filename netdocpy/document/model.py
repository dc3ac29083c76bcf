"""Document data model."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Item:
    """One keyword line plus its optional decoded object."""

    keyword: str
    arguments: tuple[str, ...] = ()
    object: bytes | None = None
    object_label: str | None = None

    @property
    def has_object(self) -> bool:
        return self.object is not None


@dataclass(frozen=True, slots=True)
class Document:
    """Items in source order."""

    items: tuple[Item, ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def keywords(self) -> tuple[str, ...]:
        return tuple(item.keyword for item in self.items)

    def get(self, keyword: str) -> Item | None:
        """First item with `keyword`, if any."""
        for item in self.items:
            if item.keyword == keyword:
                return item
        return None

    def get_all(self, keyword: str) -> tuple[Item, ...]:
        return tuple(item for item in self.items if item.keyword == keyword)

    def to_multimap(self) -> dict[str, list[Item]]:
        grouped: dict[str, list[Item]] = {}
        for item in self.items:
            grouped.setdefault(item.keyword, []).append(item)
        return grouped
