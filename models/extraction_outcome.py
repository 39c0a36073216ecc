from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar


T = TypeVar("T")


@dataclass(frozen=True)
class ExtractionOutcome(Generic[T]):
    found: bool
    value: T

    @classmethod
    def hit(cls, value: T) -> "ExtractionOutcome[T]":
        return cls(True, value)

    @classmethod
    def miss(cls, default: T) -> "ExtractionOutcome[T]":
        return cls(False, default)

    def or_else(self, fallback: Callable[[], "ExtractionOutcome[T]"]) -> "ExtractionOutcome[T]":
        """Return self when found, otherwise evaluate the fallback attempt."""
        return self if self.found else fallback()

    def value_or(self, default: T) -> T:
        return self.value if self.found else default
