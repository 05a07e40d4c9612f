"""
Import registry.

Deduplicates fully-qualified type paths into an ordered import set and
hands back the short (last segment) name to use in signatures.

NOTE:
    Two different paths sharing a short name (App\\Mail\\Mailer and
    Vendor\\Mailer) are both recorded and both shorten to "Mailer".
    No aliasing is attempted.
"""

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from codesynth.language import NAMESPACE_SEPARATOR

logger = logging.getLogger(__name__)


def is_qualified(path: Optional[str]) -> bool:
    """Whether a type reference contains a namespace separator."""
    return bool(path) and NAMESPACE_SEPARATOR in path


def short_name(path: str) -> str:
    """Final segment of a type path; unqualified names pass through."""
    if not is_qualified(path):
        return path
    return path.rsplit(NAMESPACE_SEPARATOR, 1)[-1]


class ImportSet:
    """Ordered, deduplicated collection of fully-qualified paths."""

    def __init__(self, paths: Iterable[str] = ()):
        self._paths: List[str] = []
        for path in paths:
            self.register(path)

    def register(self, path: str) -> str:
        """
        Record a type path and return its short name.

        Unqualified names are returned unchanged and not recorded; so are
        global names such as \\Exception once the leading separator is
        stripped. Registering the same path twice records it once.
        """
        if not is_qualified(path):
            return path
        normalized = path.lstrip(NAMESPACE_SEPARATOR)
        if not is_qualified(normalized):
            return normalized
        if normalized not in self._paths:
            logger.debug("Registering import %s", normalized)
            self._paths.append(normalized)
        return short_name(normalized)

    def merge(self, other: Iterable[str]) -> "ImportSet":
        for path in other:
            self.register(path)
        return self

    def as_tuple(self) -> Tuple[str, ...]:
        return tuple(self._paths)

    def copy(self) -> "ImportSet":
        return ImportSet(self._paths)

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths)

    def __len__(self) -> int:
        return len(self._paths)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, str):
            return False
        return path.lstrip(NAMESPACE_SEPARATOR) in self._paths

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ImportSet):
            return self._paths == other._paths
        return NotImplemented

    def __repr__(self) -> str:
        return f"ImportSet({self._paths!r})"
