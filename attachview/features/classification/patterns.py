from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

_WILDCARD_SUFFIX = "/*"


class PatternKind(str, Enum):
    EXACT = "exact"
    WILDCARD = "wildcard"


@dataclass(frozen=True)
class TypePattern:
    """A MIME matching rule: an exact type or a whole major type such as ``audio/*``."""

    kind: PatternKind
    value: str

    @classmethod
    def parse(cls, raw: str) -> TypePattern:
        cleaned = raw.strip().lower()
        if cleaned.endswith(_WILDCARD_SUFFIX):
            return cls(kind=PatternKind.WILDCARD, value=cleaned[: -len(_WILDCARD_SUFFIX)])
        return cls(kind=PatternKind.EXACT, value=cleaned)

    def matches(self, candidate: str) -> bool:
        if self.kind is PatternKind.WILDCARD:
            return _major_type(candidate) == self.value
        return candidate == self.value


PatternTable = tuple[TypePattern, ...]


def _major_type(mime_type: str) -> str:
    return mime_type.split("/", 1)[0]


def pattern_table(*raw_patterns: str) -> PatternTable:
    return tuple(TypePattern.parse(item) for item in raw_patterns if item.strip())


def matches(candidate: str | None, table: Iterable[TypePattern]) -> bool:
    if not candidate:
        return False
    normalized = candidate.strip().lower()
    if not normalized:
        return False
    return any(pattern.matches(normalized) for pattern in table)


__all__ = [
    "PatternKind",
    "PatternTable",
    "TypePattern",
    "matches",
    "pattern_table",
]
