from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Error:
    """A Lisp-level error. Inert data: it is returned, never raised."""
    message: str

    def __str__(self) -> str:
        return f"<error: {self.message}>"
