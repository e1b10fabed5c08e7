"""Commands produced by the effect vocabulary.

Every command is a frozen dataclass, so two decodes of the same token compare
and hash equal and a set of clear effects keeps one copy of each. Commands hold
no world or room reference; ``dungeon.systems.command_system`` executes them
against an explicit room entity.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from dungeon.components.direction import Direction
from dungeon.constants import TELEPORT_ANIMATION
from dungeon.layout.descriptors import EnemyDescriptor, PickupDescriptor


@dataclass(frozen=True, slots=True)
class TeleportLink:
    direction: Direction
    animation: str = TELEPORT_ANIMATION


@dataclass(frozen=True, slots=True)
class SetDoorOpen:
    direction: Direction


@dataclass(frozen=True, slots=True)
class StopMusic:
    pass


@dataclass(frozen=True, slots=True)
class PlayMusic:
    track: str


@dataclass(frozen=True, slots=True)
class PlaySound:
    effect: str


@dataclass(frozen=True, slots=True)
class SpawnPickup:
    """Spawn a pickup later; the template's position is ignored at spawn time."""
    template: PickupDescriptor


@dataclass(frozen=True, slots=True)
class SpawnEnemy:
    template: EnemyDescriptor


@dataclass(frozen=True, slots=True)
class NoOp:
    pass


Command = Union[
    TeleportLink,
    SetDoorOpen,
    StopMusic,
    PlayMusic,
    PlaySound,
    SpawnPickup,
    SpawnEnemy,
    NoOp,
]
