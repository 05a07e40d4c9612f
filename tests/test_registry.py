"""
Tests for the unique member registry and its binary search.
"""

import pytest
from dataclasses import dataclass
from codesynth.errors import DuplicateMemberError
from codesynth.registry import MemberRegistry, SearchResult, bsearch


@dataclass
class Item:
    name: str
    tag: str = ""

    def equals(self, other) -> bool:
        return self.name == other.name


def _compare(key, target):
    if key == target:
        return SearchResult.FOUND
    return SearchResult.LEFT if key > target else SearchResult.RIGHT


class TestBinarySearch:
    """Tri-state binary search."""

    def test_finds_each_key(self):
        keys = ["a", "c", "e", "g"]
        for index, key in enumerate(keys):
            assert bsearch(keys, key, _compare) == index

    def test_missing_key(self):
        assert bsearch(["a", "c", "e"], "d", _compare) == -1
        assert bsearch(["a", "c", "e"], "z", _compare) == -1
        assert bsearch(["a", "c", "e"], "0", _compare) == -1

    def test_empty_keys(self):
        assert bsearch([], "a", _compare) == -1


class TestMemberRegistry:
    """Duplicate rejection and ordering."""

    def _registry(self, pinned=None):
        return MemberRegistry(lambda n: DuplicateMemberError(n, "item"), pinned=pinned)

    def test_insertion_order_kept(self):
        registry = self._registry()
        for name in ["zeta", "alpha", "mid"]:
            registry.insert(Item(name))
        assert registry.names() == ["zeta", "alpha", "mid"]
        assert len(registry) == 3

    def test_duplicate_rejected(self):
        registry = self._registry()
        registry.insert(Item("alpha"))
        registry.insert(Item("beta"))
        with pytest.raises(DuplicateMemberError) as exc:
            registry.insert(Item("alpha", tag="second"))
        assert exc.value.name == "alpha"

    def test_failed_insert_leaves_registry_unchanged(self):
        registry = self._registry()
        registry.insert(Item("alpha", tag="first"))
        with pytest.raises(DuplicateMemberError):
            registry.insert(Item("alpha", tag="second"))
        assert registry.names() == ["alpha"]
        assert registry.get("alpha").tag == "first"

    def test_duplicate_found_among_many(self):
        registry = self._registry()
        names = ["m%02d" % i for i in range(20)]
        for name in reversed(names):
            registry.insert(Item(name))
        for name in names:
            with pytest.raises(DuplicateMemberError):
                registry.insert(Item(name))

    def test_pinned_member_goes_first(self):
        registry = self._registry(pinned="__construct")
        registry.insert(Item("foo"))
        registry.insert(Item("bar"))
        registry.insert(Item("__construct"))
        assert registry.names() == ["__construct", "foo", "bar"]

    def test_lookup_helpers(self):
        registry = self._registry()
        registry.insert(Item("alpha"))
        assert "alpha" in registry
        assert "beta" not in registry
        assert registry.get("beta") is None
        assert [i.name for i in registry] == ["alpha"]
