"""Identifiers handed out to the objects of a cell model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True, slots=True)
class Id:
    """An opaque, ordered and hashable identifier."""

    value: int

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)