"""Errors raised while decoding a room description.

Every error here is fatal for the room being loaded: the description is static
content, so a failure means the file has to be fixed rather than worked around.
"""
from __future__ import annotations


class RoomDecodeError(ValueError):
    """Base class carrying the location of the offending content."""

    def __init__(
        self,
        message: str,
        *,
        row: int | None = None,
        column: int | None = None,
        token: str | None = None,
    ) -> None:
        self.row = row
        self.column = column
        self.token = token
        super().__init__(self._describe(message))

    def _describe(self, message: str) -> str:
        where = []
        if self.row is not None:
            where.append(f"row {self.row}")
        if self.column is not None:
            where.append(f"column {self.column}")
        if self.token is not None:
            where.append(f"token {self.token!r}")
        if not where:
            return message
        return f"{message} ({', '.join(where)})"


class RowShapeError(RoomDecodeError):
    """A row has the wrong number of fields, or a required row is missing."""


class UnknownTokenError(RoomDecodeError):
    """A token is not part of the entity (or door state) vocabulary."""


class UnknownEffectError(RoomDecodeError):
    """A token is not part of the effect vocabulary."""


class MalformedNumberError(RoomDecodeError):
    """A numeric field could not be parsed or is out of range."""
