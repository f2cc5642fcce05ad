"""An immutable key-value pair."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass(frozen=True)
class Pair(Generic[K, V]):
    """A key together with its value."""

    key: K
    value: V

    def swap(self) -> Pair[V, K]:
        """Return a new pair with key and value exchanged."""
        return Pair(self.value, self.key)