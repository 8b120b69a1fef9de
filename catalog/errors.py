"""
Resolution failure taxonomy.

Failures are values, not exceptions: the resolver returns a ResolutionError
and the HTTP layer turns it into a status code and an {"error": message} body.
IconUnavailable has no type here because it never leaves the resolver.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class ErrorKind(str, Enum):
    INVALID_INPUT = "InvalidInput"
    NOT_FOUND = "NotFound"
    INTERNAL = "Internal"

    @property
    def status(self) -> int:
        return _STATUS[self]


_STATUS = {
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
}


@dataclass(frozen=True)
class ResolutionError:
    kind: ErrorKind
    message: str

    @property
    def status(self) -> int:
        return self.kind.status

    def to_json(self) -> Dict[str, Any]:
        return {"error": self.message}

    @classmethod
    def invalid_input(cls, message: str = "Invalid place ID") -> "ResolutionError":
        return cls(ErrorKind.INVALID_INPUT, message)

    @classmethod
    def not_found(cls, message: str = "Game not found") -> "ResolutionError":
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def internal(cls, message: str = "Internal server error") -> "ResolutionError":
        return cls(ErrorKind.INTERNAL, message)
