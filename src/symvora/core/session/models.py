"""Session data models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """The signed-in account holder.

    ``email`` identifies the account and never changes; a new ``name`` is
    applied by replacing the whole record.
    """

    email: str
    name: str

    def to_dict(self) -> dict[str, str]:
        return {"email": self.email, "name": self.name}
