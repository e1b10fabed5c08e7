"""Room loader: reads a room description and runs every decoder over it.

Description layout (one line per row)::

    rows 0-10  16 comma-separated cells, each a ';'-separated token list
    row 11     room position "x;y"
    row 12     4 door tokens, clockwise from the left
    row 13     4 "x;y" entry spawn tiles (floats)
    row 14     room type (integer)
    row 15     comma-separated clear-effect tokens
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from dungeon.components.door_state import DoorState
from dungeon.components.geometry import Point
from dungeon.components.room_type import RoomType
from dungeon.constants import ROOM_COLS, ROOM_ORIGIN, ROOM_ROWS, TILE_SIZE
from dungeon.errors import RoomDecodeError, RowShapeError
from dungeon.layout.commands import Command
from dungeon.layout.descriptors import PlacedEntity, tile_box
from dungeon.layout.metadata import (
    parse_clear_effects,
    parse_door_states,
    parse_position,
    parse_room_type,
    parse_spawn_points,
)
from dungeon.layout.tile_composer import compose_tile
from dungeon.layout.tokenizer import tokenize

logger = logging.getLogger(__name__)

TRAILER_ROWS = ("position", "doors", "spawn points", "room type", "clear effects")


@dataclass(frozen=True, slots=True)
class RoomLayout:
    entities: tuple[PlacedEntity, ...]
    position: Point
    doors: tuple[DoorState, ...]
    spawn_points: tuple[Point, ...]
    room_type: RoomType
    clear_effects: frozenset[Command]


def read_room_file(path: str | Path) -> list[str]:
    """Read a whole room description; a UTF-8 byte-order mark is ignored."""
    return Path(path).read_text(encoding="utf-8-sig").splitlines()


def decode_room(
    lines: Sequence[str],
    *,
    tile_size: int = TILE_SIZE,
    origin: tuple[int, int] | Point = ROOM_ORIGIN,
) -> RoomLayout:
    grid, trailer = tokenize(lines, width=ROOM_COLS, height=ROOM_ROWS)
    if len(trailer) < len(TRAILER_ROWS):
        missing = TRAILER_ROWS[len(trailer)]
        raise RowShapeError(f"Missing {missing} row", row=ROOM_ROWS + len(trailer))

    entities: list[PlacedEntity] = []
    for cell, tokens in grid.iter_cells():
        entities.extend(compose_tile(tokens, cell, tile_box(cell, tile_size, origin)))
    logger.debug("Decoded %d entities from %dx%d grid", len(entities), grid.width, grid.height)

    position_row = ROOM_ROWS
    layout = RoomLayout(
        entities=tuple(entities),
        position=parse_position(trailer[0], row=position_row),
        doors=parse_door_states(trailer[1], row=position_row + 1),
        spawn_points=parse_spawn_points(trailer[2], tile_size, row=position_row + 2),
        room_type=parse_room_type(trailer[3], row=position_row + 3),
        clear_effects=parse_clear_effects(trailer[4], row=position_row + 4),
    )
    return layout


def load_room(
    path: str | Path,
    *,
    tile_size: int = TILE_SIZE,
    origin: tuple[int, int] | Point = ROOM_ORIGIN,
) -> RoomLayout:
    try:
        layout = decode_room(read_room_file(path), tile_size=tile_size, origin=origin)
    except RoomDecodeError as exc:
        logger.error("Invalid room description %s: %s", path, exc)
        raise
    logger.info(
        "Loaded room %s at (%d, %d) with %d entities",
        path,
        layout.position.x,
        layout.position.y,
        len(layout.entities),
    )
    return layout
