"""A single validation error message."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Error:
    message: str

    def __str__(self) -> str:
        return self.message
