"""Projection - which document fields to leave out of a payload."""

from dataclasses import dataclass
from typing import Any

INTERNAL_FIELDS = frozenset({"version"})


@dataclass(frozen=True)
class Projection:
    """Document keys to drop from a payload after it is read."""

    excluded: frozenset[str] = frozenset()

    @classmethod
    def default(cls) -> "Projection":
        """Hide internal revision fields."""
        return cls(INTERNAL_FIELDS)

    @classmethod
    def none(cls) -> "Projection":
        return cls()

    @classmethod
    def exclude(cls, *keys: str) -> "Projection":
        return cls(frozenset(keys))

    def apply(self, document: dict[str, Any]) -> dict[str, Any]:
        """Return a copy of document without the excluded keys."""
        return {k: v for k, v in document.items() if k not in self.excluded}
