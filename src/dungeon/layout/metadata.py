"""Decoders for the fixed rows that follow the grid."""
from __future__ import annotations

import math
from typing import Mapping

from dungeon.components.door_state import DoorState
from dungeon.components.geometry import Point
from dungeon.components.room_type import RoomType
from dungeon.constants import DOOR_COUNT, FIELD_SEPARATOR, ITEM_SEPARATOR
from dungeon.errors import MalformedNumberError, RowShapeError, UnknownTokenError
from dungeon.layout.commands import Command
from dungeon.layout.effect_tokens import decode_effect
from dungeon.layout.tokenizer import split_fields
from dungeon.utils.rounding import round_half_away_from_zero

DOOR_TOKENS: Mapping[str, DoorState] = {
    "od": DoorState.OPEN,
    "cd": DoorState.CLOSED,
    "nd": DoorState.NONE,
    "ld": DoorState.LOCKED,
    "hd": DoorState.BLOCKED_HOLE,
    "ohd": DoorState.HOLE,
}


def _split_pair(field: str, *, row: int | None, column: int | None = None) -> tuple[str, str]:
    parts = field.split(ITEM_SEPARATOR)
    if len(parts) != 2:
        raise RowShapeError(
            f"Expected an 'x;y' pair, found {len(parts)} part(s)",
            row=row,
            column=column,
            token=field,
        )
    return parts[0], parts[1]


def _parse_int(text: str, *, row: int | None, column: int | None = None) -> int:
    try:
        return int(text)
    except ValueError as exc:
        raise MalformedNumberError("Expected an integer", row=row, column=column, token=text) from exc


def _parse_float(text: str, *, row: int | None, column: int | None = None) -> float:
    try:
        value = float(text)
    except ValueError as exc:
        raise MalformedNumberError("Expected a number", row=row, column=column, token=text) from exc
    if not math.isfinite(value):
        raise MalformedNumberError("Expected a finite number", row=row, column=column, token=text)
    return value


def parse_position(line: str, *, row: int | None = None) -> Point:
    """Room location in the dungeon's room grid, written ``x;y``."""
    (field,) = split_fields(line, 1, row=row)
    raw_x, raw_y = _split_pair(field, row=row)
    return Point(_parse_int(raw_x, row=row), _parse_int(raw_y, row=row))


def parse_door_states(line: str, *, row: int | None = None) -> tuple[DoorState, ...]:
    """Four door tokens, clockwise from the left wall."""
    states = []
    for column, token in enumerate(split_fields(line, DOOR_COUNT, row=row)):
        try:
            states.append(DOOR_TOKENS[token])
        except KeyError as exc:
            raise UnknownTokenError("Unknown door state", row=row, column=column, token=token) from exc
    return tuple(states)


def parse_spawn_points(line: str, tile_size: int, *, row: int | None = None) -> tuple[Point, ...]:
    """Four ``x;y`` tile positions, converted to room-relative pixels.

    Values are floats because top and bottom entries sit on a tile seam.
    """
    points = []
    for column, field in enumerate(split_fields(line, DOOR_COUNT, row=row)):
        raw_x, raw_y = _split_pair(field, row=row, column=column)
        x = _parse_float(raw_x, row=row, column=column)
        y = _parse_float(raw_y, row=row, column=column)
        points.append(
            Point(
                round_half_away_from_zero(x * tile_size),
                round_half_away_from_zero(y * tile_size),
            )
        )
    return tuple(points)


def parse_room_type(line: str, *, row: int | None = None) -> RoomType:
    (field,) = split_fields(line, 1, row=row)
    value = _parse_int(field, row=row)
    try:
        return RoomType(value)
    except ValueError as exc:
        raise MalformedNumberError("Room type out of range", row=row, token=field) from exc


def parse_clear_effects(line: str, *, row: int | None = None) -> frozenset[Command]:
    """Commands to run when the room is cleared; duplicates collapse."""
    return frozenset(
        decode_effect(token, row=row, column=column)
        for column, token in enumerate(line.split(FIELD_SEPARATOR))
    )
