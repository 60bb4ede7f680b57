from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Protocol

from pydantic import BaseModel, ConfigDict

_VERSION_RE = re.compile(r"\d+(?:\.\d+)*")
_CONDITION_RE = re.compile(r"^\s*(<=|>=|<|>|=|~)?\s*(\d+(?:\.\d+)*)\s*$")


class BrowserCapability(Protocol):
    def satisfies(self, requirements: Mapping[str, str]) -> bool: ...

    def is_platform(self, name: str) -> bool: ...


def _parse_version(value: str | None) -> tuple[int, ...] | None:
    if not value:
        return None
    match = _VERSION_RE.search(value)
    if match is None:
        return None
    return tuple(int(part) for part in match.group(0).split("."))


def _pad(left: tuple[int, ...], right: tuple[int, ...]) -> tuple[tuple[int, ...], tuple[int, ...]]:
    width = max(len(left), len(right))
    return left + (0,) * (width - len(left)), right + (0,) * (width - len(right))


def version_matches(version: str | None, condition: str) -> bool:
    """Evaluate ``condition`` such as ``"<14"`` or ``"~13.1"`` against a dotted version."""
    parsed = _parse_version(version)
    match = _CONDITION_RE.match(condition)
    if parsed is None or match is None:
        return False
    operator = match.group(1) or "="
    target = tuple(int(part) for part in match.group(2).split("."))
    if operator == "~":
        return parsed[: len(target)] == target
    current, wanted = _pad(parsed, target)
    if operator == "<":
        return current < wanted
    if operator == "<=":
        return current <= wanted
    if operator == ">":
        return current > wanted
    if operator == ">=":
        return current >= wanted
    return current == wanted


class ClientBrowser(BaseModel):
    """Browser facts reported by the host application; nothing is sniffed here."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    version: str | None = None
    platform: str | None = None

    def satisfies(self, requirements: Mapping[str, str]) -> bool:
        if not self.name:
            return False
        current = self.name.strip().lower()
        for browser_name, condition in requirements.items():
            if browser_name.strip().lower() == current:
                return version_matches(self.version, condition)
        return False

    def is_platform(self, name: str) -> bool:
        wanted = name.strip().lower()
        if not wanted:
            return False
        return any(
            value is not None and value.strip().lower() == wanted
            for value in (self.platform, self.name)
        )
