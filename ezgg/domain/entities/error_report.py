"""Classified failure, ready for display."""
from dataclasses import dataclass
from ..enums import ErrorKind


@dataclass(frozen=True)
class ErrorReport:
    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return self.message
