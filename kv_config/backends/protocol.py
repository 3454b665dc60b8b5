"""Backend interface definitions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True, slots=True)
class KeyValue:
    """A single backend entry; ``value`` is None for keys without a payload."""

    key: str
    value: str | None = None


@dataclass(slots=True)
class KeyValueList:
    """Ordered entries found under a prefix.

    ``present`` is False when the prefix does not exist in the store at all,
    which is distinct from a prefix that exists but holds no entries.
    """

    entries: list[KeyValue] = field(default_factory=list)
    present: bool = True

    @classmethod
    def absent(cls) -> KeyValueList:
        return cls(entries=[], present=False)

    @classmethod
    def from_entries(cls, entries: list[KeyValue]) -> KeyValueList:
        """Build a list whose presence is inferred from having any entry."""
        return cls(entries=entries, present=bool(entries))

    def __iter__(self) -> Iterator[KeyValue]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


class Backend(ABC):
    """Async key-value client capability used by configuration stores."""

    @abstractmethod
    async def get_values(self, prefix: str) -> KeyValueList:
        """Return all entries whose key begins with prefix, ordered by key."""

    @abstractmethod
    async def close(self) -> None:
        """Close any backend resources."""
