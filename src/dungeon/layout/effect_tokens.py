"""Effect vocabulary used after special triggers and in the clear-effects row.

This table is deliberately separate from the entity vocabulary: ``"hi"`` here
means "spawn a heart later", and ``"od"`` means "open the bottom door" rather
than the door-state row's "open door".
"""
from __future__ import annotations

from typing import Iterable, Mapping

from dungeon.components.direction import Direction
from dungeon.components.geometry import Point
from dungeon.errors import UnknownEffectError
from dungeon.layout.commands import (
    Command,
    NoOp,
    PlayMusic,
    PlaySound,
    SetDoorOpen,
    SpawnEnemy,
    SpawnPickup,
    StopMusic,
    TeleportLink,
)
from dungeon.layout.descriptors import EnemyDescriptor
from dungeon.layout.entity_tokens import pickup_descriptor

# Deferred spawns are positioned by the command when it runs.
TEMPLATE_POSITION = Point(0, 0)


def _spawn_pickup(kind: str, *, upgraded: bool = False) -> SpawnPickup:
    return SpawnPickup(pickup_descriptor(kind, TEMPLATE_POSITION, upgraded=upgraded))


def _spawn_enemy(kind: str, variant: str | None = None) -> SpawnEnemy:
    return SpawnEnemy(EnemyDescriptor(kind, TEMPLATE_POSITION, variant=variant))


_EFFECT_TOKENS: Mapping[str, Command] = {
    "tu": TeleportLink(Direction.UP),
    "tr": TeleportLink(Direction.RIGHT),
    "td": TeleportLink(Direction.DOWN),
    "tl": TeleportLink(Direction.LEFT),
    "ou": SetDoorOpen(Direction.UP),
    "or": SetDoorOpen(Direction.RIGHT),
    "od": SetDoorOpen(Direction.DOWN),
    "ol": SetDoorOpen(Direction.LEFT),
    "sm": StopMusic(),
    "past": PlayMusic("RickRoll"),
    "pmii": PlayMusic("MiiTheme"),
    "ppoke": PlayMusic("Pokemon"),
    "prse": PlaySound("Magical"),
    "pkse": PlaySound("KeyAppearance"),
    "hi": _spawn_pickup("heart"),
    "ci1": _spawn_pickup("candle"),
    "tpi": _spawn_pickup("triforce_piece"),
    "bowi": _spawn_pickup("bow"),
    "wbi": _spawn_pickup("boomerang"),
    "ki": _spawn_pickup("key"),
    "bm1": _spawn_pickup("boomerang"),
    "hc": _spawn_pickup("heart_container"),
    "mgw": _spawn_enemy("game_and_watch"),
    "wme": _spawn_enemy("wall_master"),
    "re": _spawn_enemy("rope"),
    "ke": _spawn_enemy("keese"),
    "gre": _spawn_enemy("goriya", "red"),
    "": NoOp(),
    "none": NoOp(),
}


def decode_effect(token: str, *, row: int | None = None, column: int | None = None) -> Command:
    """Decode one effect token.

    ``row``/``column`` only feed the error message. Raises
    ``UnknownEffectError`` for tokens outside the vocabulary.
    """
    try:
        return _EFFECT_TOKENS[token]
    except KeyError as exc:
        raise UnknownEffectError(
            "Unknown effect token",
            row=row,
            column=column,
            token=token,
        ) from exc


def effect_tokens() -> Iterable[str]:
    return _EFFECT_TOKENS.keys()
