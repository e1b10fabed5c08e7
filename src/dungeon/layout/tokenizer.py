from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence, Tuple

from dungeon.components.geometry import Point
from dungeon.constants import FIELD_SEPARATOR, ITEM_SEPARATOR, ROOM_COLS, ROOM_ROWS
from dungeon.errors import RowShapeError

Cell = Tuple[str, ...]


@dataclass(frozen=True, slots=True)
class TokenGrid:
    """Per-cell token lists, stored as ``rows[y][x]``."""

    rows: Tuple[Tuple[Cell, ...], ...]

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def cell(self, x: int, y: int) -> Cell:
        return self.rows[y][x]

    def iter_cells(self) -> Iterator[tuple[Point, Cell]]:
        """Yield cells row-major: top row first, left to right within a row."""
        for y, row in enumerate(self.rows):
            for x, cell in enumerate(row):
                yield Point(x, y), cell


def split_fields(line: str, expected: int, *, row: int | None) -> list[str]:
    """Split ``line`` into exactly ``expected`` comma-separated fields.

    Trailing empty fields beyond ``expected`` (spreadsheet exports pad rows with
    commas) are dropped; any other count raises ``RowShapeError``.
    """
    fields = line.split(FIELD_SEPARATOR)
    if len(fields) < expected:
        raise RowShapeError(f"Expected {expected} fields, found {len(fields)}", row=row)
    extra = fields[expected:]
    if any(extra):
        raise RowShapeError(f"Expected {expected} fields, found {len(fields)}", row=row)
    return fields[:expected]


def split_cell(field: str) -> Cell:
    # An empty field still yields one (empty) token.
    return tuple(field.split(ITEM_SEPARATOR))


def tokenize(
    lines: Sequence[str],
    *,
    width: int = ROOM_COLS,
    height: int = ROOM_ROWS,
) -> tuple[TokenGrid, list[str]]:
    """Split the first ``height`` lines into a token grid.

    Returns the grid and the untouched remaining lines.
    """
    if len(lines) < height:
        raise RowShapeError(f"Expected {height} grid rows, found {len(lines)}", row=len(lines))
    rows = []
    for y in range(height):
        fields = split_fields(lines[y], width, row=y)
        rows.append(tuple(split_cell(field) for field in fields))
    return TokenGrid(rows=tuple(rows)), list(lines[height:])
