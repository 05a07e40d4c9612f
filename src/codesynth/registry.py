"""
Unique member registry.

Keeps members (methods, properties, parameters) in insertion order while
rejecting duplicates. Duplicate detection runs a tri-state binary search
over an explicit, sorted list of name keys; member objects are looked up
by key.
"""

from enum import Enum
from typing import Callable, Dict, Generic, Iterator, List, Optional, Protocol, Sequence, TypeVar


class SearchResult(Enum):
    """Outcome of comparing a search key against the target."""
    FOUND = 0
    LEFT = -1
    RIGHT = 1


K = TypeVar("K")
V = TypeVar("V")


def bsearch(keys: Sequence[K], target: V, compare: Callable[[K, V], SearchResult]) -> int:
    """
    Binary search an ascending sequence of keys.

    Args:
        keys: Sorted keys
        target: Value searched for
        compare: Returns FOUND when the key matches the target, LEFT when
            the target sorts before the key, RIGHT when it sorts after

    Returns:
        Index of the matching key, or -1
    """
    lo, hi = 0, len(keys) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        result = compare(keys[mid], target)
        if result is SearchResult.FOUND:
            return mid
        if result is SearchResult.LEFT:
            hi = mid - 1
        else:
            lo = mid + 1
    return -1


class Named(Protocol):
    name: str

    def equals(self, other) -> bool: ...


T = TypeVar("T", bound=Named)


class MemberRegistry(Generic[T]):
    """
    Ordered collection of uniquely named members.

    Args:
        on_duplicate: Factory called with the conflicting name to build
            the exception raised on a duplicate insertion
        pinned: Name of the member always kept first in iteration order
    """

    def __init__(
        self,
        on_duplicate: Callable[[str], Exception],
        pinned: Optional[str] = None,
    ):
        self._members: List[T] = []
        self._on_duplicate = on_duplicate
        self._pinned = pinned

    def find(self, member: T) -> int:
        """Position of an equal member in the sorted key list, or -1."""
        by_name: Dict[str, T] = {m.name: m for m in self._members}
        keys = sorted(by_name)

        def compare(key: str, item: T) -> SearchResult:
            if by_name[key].equals(item):
                return SearchResult.FOUND
            return SearchResult.LEFT if key > item.name else SearchResult.RIGHT

        return bsearch(keys, member, compare)

    def insert(self, member: T) -> T:
        if self.find(member) != -1:
            raise self._on_duplicate(member.name)
        if self._pinned is not None and member.name == self._pinned:
            self._members.insert(0, member)
        else:
            self._members.append(member)
        return member

    def get(self, name: str) -> Optional[T]:
        for member in self._members:
            if member.name == name:
                return member
        return None

    def names(self) -> List[str]:
        return [m.name for m in self._members]

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._members))

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, name: object) -> bool:
        return any(m.name == name for m in self._members)

    def __repr__(self) -> str:
        return f"MemberRegistry({self.names()!r})"
