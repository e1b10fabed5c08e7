from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, List, Tuple

from dungeon.components.direction import Direction
from dungeon.components.door_state import DoorState
from dungeon.components.geometry import Point
from dungeon.components.room_type import RoomType


@dataclass
class Room:
    """Room-level state created once per load.

    ``doors`` and ``spawn_points`` are indexed by ``Direction.value``.
    ``clear_effects`` run once, the first time the room is cleared.
    """
    position: Point
    doors: List[DoorState]
    spawn_points: Tuple[Point, ...]
    room_type: RoomType = RoomType.NORMAL
    clear_effects: FrozenSet[object] = field(default_factory=frozenset)
    cleared: bool = False

    def door(self, direction: Direction) -> DoorState:
        return self.doors[direction.value]
