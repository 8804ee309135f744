"""An ordered, tag-keyed dictionary of entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

__all__ = ["DictEntry", "TagDict", "join_dict", "conditional_append_dict"]


@dataclass(frozen=True)
class DictEntry:
    """One key/value pair of a :class:`TagDict`."""

    key: Any
    value: Any


class TagDict:
    """An ordered collection of entries looked up by tag.

    Entries are given as :class:`DictEntry` objects or ``(key, value)`` pairs.
    Tags are compared by equality and need not be hashable.
    """

    def __init__(self, *args: DictEntry | tuple[Any, Any]) -> None:
        entries: list[DictEntry] = []
        for arg in args:
            if isinstance(arg, DictEntry):
                entry = arg
            elif isinstance(arg, tuple) and len(arg) == 2:
                entry = DictEntry(*arg)
            else:
                raise TypeError(f"expected a DictEntry or a (key, value) pair, got {arg!r}")
            if any(existing.key == entry.key for existing in entries):
                raise ValueError(f"duplicate tag {entry.key!r}")
            entries.append(entry)
        self._entries = tuple(entries)

    def index(self, tag: Any) -> int:
        """Position of ``tag``, or -1 if it is not present."""
        return next((pos for pos, entry in enumerate(self._entries) if entry.key == tag), -1)

    def has_tag(self, tag: Any) -> bool:
        """True if an entry with ``tag`` exists."""
        return self.index(tag) != -1

    def __getitem__(self, tag: Any) -> Any:
        pos = self.index(tag)
        if pos == -1:
            raise KeyError(tag)
        return self._entries[pos].value

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[DictEntry]:
        return iter(self._entries)

    def __repr__(self) -> str:
        inner = ", ".join(f"{e.key!r}: {e.value!r}" for e in self._entries)
        return f"TagDict({{{inner}}})"


def join_dict(first: TagDict, second: TagDict) -> TagDict:
    """A new dictionary holding the entries of ``first`` followed by those of ``second``."""
    return TagDict(*first, *second)


def conditional_append_dict(condition: bool, first: TagDict, second: TagDict) -> TagDict:
    """Join the dictionaries if ``condition`` holds, otherwise return ``first`` unchanged."""
    if condition:
        return join_dict(first, second)
    return first