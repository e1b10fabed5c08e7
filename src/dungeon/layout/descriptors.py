"""Decoded, not-yet-spawned representations of room entities.

Descriptors are frozen value objects: decoding the same token at the same
position always yields an equal descriptor, and nothing here touches a world.
``dungeon.factories.room_entities`` turns them into esper entities.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Union

from dungeon.components.geometry import Box, Point

if TYPE_CHECKING:
    from dungeon.layout.commands import Command


@dataclass(frozen=True, slots=True)
class BlockDescriptor:
    kind: str
    position: Point
    pushable: bool = False


@dataclass(frozen=True, slots=True)
class EnemyDescriptor:
    kind: str
    position: Point
    variant: str | None = None


@dataclass(frozen=True, slots=True)
class PickupDescriptor:
    kind: str
    position: Point
    holds_up: bool = False
    upgraded: bool = False
    value: int = 0


@dataclass(frozen=True, slots=True)
class SpecialTriggerDescriptor:
    position: Point
    rearm: bool = False
    effect: "Command | None" = None

    def with_effect(self, effect: "Command") -> "SpecialTriggerDescriptor":
        return replace(self, effect=effect)


@dataclass(frozen=True, slots=True)
class MenuMarkerDescriptor:
    position: Point
    font: str


@dataclass(frozen=True, slots=True)
class HolderDescriptor:
    """Enemy carrying a pickup that it drops on death.

    Exposes the same ``kind``/``position``/``variant`` fields as the enemy it
    wraps so callers that only care about the enemy need not unwrap it.
    """

    enemy: EnemyDescriptor
    pickup: PickupDescriptor

    @property
    def kind(self) -> str:
        return self.enemy.kind

    @property
    def position(self) -> Point:
        return self.enemy.position

    @property
    def variant(self) -> str | None:
        return self.enemy.variant


@dataclass(frozen=True, slots=True)
class SpawnCloudDescriptor:
    """Spawn-visual wrapper around an enemy (or holder) entering the room."""

    inner: "EnemyDescriptor | HolderDescriptor"

    @property
    def position(self) -> Point:
        return self.inner.position


EntityDescriptor = Union[
    BlockDescriptor,
    EnemyDescriptor,
    PickupDescriptor,
    SpecialTriggerDescriptor,
    MenuMarkerDescriptor,
    HolderDescriptor,
    SpawnCloudDescriptor,
]


@dataclass(frozen=True, slots=True)
class PlacedEntity:
    descriptor: EntityDescriptor
    box: Box


def tile_box(cell: Point, tile_size: int, origin: tuple[int, int] | Point = (0, 0)) -> Box:
    """Pixel box covering grid ``cell`` for a room drawn at ``origin``."""
    ox, oy = (origin.x, origin.y) if isinstance(origin, Point) else origin
    return Box(
        x=ox + cell.x * tile_size,
        y=oy + cell.y * tile_size,
        width=tile_size,
        height=tile_size,
    )
