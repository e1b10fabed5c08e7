from __future__ import annotations

from pathlib import Path
from typing import Mapping

from dungeon.constants import DEFAULT_DOOR_SPAWNS, ROOM_COLS, ROOM_ROWS

ROOMS_DIR = Path(__file__).resolve().parent.parent / "src" / "dungeon" / "data" / "rooms"


def grid_lines(cells: Mapping[tuple[int, int], str] | None = None) -> list[str]:
    """Build the 11 grid rows, placing ``cells[(x, y)]`` and leaving the rest empty."""
    cells = cells or {}
    rows = []
    for y in range(ROOM_ROWS):
        rows.append(",".join(cells.get((x, y), "") for x in range(ROOM_COLS)))
    return rows


def room_lines(
    cells: Mapping[tuple[int, int], str] | None = None,
    *,
    position: str = "1;2",
    doors: str = "od,cd,nd,ld",
    spawns: str = DEFAULT_DOOR_SPAWNS,
    room_type: str = "0",
    clear_effects: str = "none",
) -> list[str]:
    """Build a complete room description as a list of lines."""
    return grid_lines(cells) + [position, doors, spawns, room_type, clear_effects]
