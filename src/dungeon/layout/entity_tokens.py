"""Entity vocabulary: one room-grid token to one entity descriptor.

The table is closed. The empty token means "nothing on this tile" and decodes
to ``None``; anything not listed is an authoring error.
"""
from __future__ import annotations

from functools import partial
from typing import Callable, Iterable, Mapping

from dungeon.components.geometry import Point
from dungeon.constants import DEFAULT_FONT, RUPEE_PICKUP_VALUE
from dungeon.errors import UnknownTokenError
from dungeon.layout.descriptors import (
    BlockDescriptor,
    EnemyDescriptor,
    EntityDescriptor,
    MenuMarkerDescriptor,
    PickupDescriptor,
    SpecialTriggerDescriptor,
)

EntityBuilder = Callable[[Point], "EntityDescriptor | None"]

# Whether the player raises the item overhead on collection.
PICKUP_HOLDS_UP: Mapping[str, bool] = {
    "arrow": True,
    "bomb": False,
    "boomerang": True,
    "bow": True,
    "candle": True,
    "clock": False,
    "compass": True,
    "fairy": False,
    "heart": False,
    "heart_container": True,
    "key": False,
    "map": True,
    "rupee": False,
    "triforce_piece": True,
}


def _block(kind: str, *, pushable: bool = False) -> EntityBuilder:
    return partial(BlockDescriptor, kind, pushable=pushable)


def _enemy(kind: str, variant: str | None = None) -> EntityBuilder:
    return partial(EnemyDescriptor, kind, variant=variant)


def pickup_descriptor(
    kind: str,
    position: Point,
    *,
    upgraded: bool = False,
    value: int = 0,
) -> PickupDescriptor:
    """Build a pickup descriptor with the kind's canonical ``holds_up`` flag."""
    return PickupDescriptor(
        kind=kind,
        position=position,
        holds_up=PICKUP_HOLDS_UP[kind],
        upgraded=upgraded,
        value=value,
    )


def _pickup(kind: str, *, upgraded: bool = False, value: int = 0) -> EntityBuilder:
    return partial(pickup_descriptor, kind, upgraded=upgraded, value=value)


def _nothing(position: Point) -> None:
    return None


_ENTITY_TOKENS: Mapping[str, EntityBuilder] = {
    # Special
    "spt": partial(SpecialTriggerDescriptor, rearm=False),
    "sptr": partial(SpecialTriggerDescriptor, rearm=True),
    "mm": partial(MenuMarkerDescriptor, font=DEFAULT_FONT),
    "": _nothing,
    # Blocks
    "npb": _block("non_pushable"),
    "wr": _block("room_void"),
    "bfb": _block("blue_floor"),
    "bsb": _block("blue_sand"),
    "bugb": _block("blue_unwalkable_gap"),
    "fb": _block("fire"),
    "lb": _block("ladder"),
    "pb1": _block("pushable_1", pushable=True),
    "pb2": _block("pushable_2", pushable=True),
    "lvb": _block("ladder_void"),
    "sb": _block("stairs"),
    "s1b": _block("statue_1"),
    "s2b": _block("statue_2"),
    "wbb": _block("white_brick"),
    "wbbf": _block("white_brick_floor"),
    # Enemies
    "bsr": _enemy("bowser"),
    "gmb": _enemy("goomba"),
    "aqe": _enemy("aquamentus"),
    "ra": _enemy("rick_astley"),
    "ge": _enemy("gel"),
    "gre": _enemy("goriya", "red"),
    "gbe": _enemy("goriya", "blue"),
    "om": _enemy("old_man"),
    "ke": _enemy("keese"),
    "re": _enemy("rope"),
    "se": _enemy("stalfos"),
    "mgw": _enemy("game_and_watch"),
    "kt": _enemy("koopa_troopa"),
    "te": _enemy("trap"),
    "wme": _enemy("wall_master"),
    # Pickups
    "ai1": _pickup("arrow"),
    "ai2": _pickup("arrow", upgraded=True),
    "ci1": _pickup("candle"),
    "ci2": _pickup("candle", upgraded=True),
    "bomi": _pickup("bomb"),
    "bowi": _pickup("bow"),
    "cli": _pickup("clock"),
    "coi": _pickup("compass"),
    "fi": _pickup("fairy"),
    "hci": _pickup("heart_container"),
    "hi": _pickup("heart"),
    "ki": _pickup("key"),
    "mi": _pickup("map"),
    "ri": _pickup("rupee", value=RUPEE_PICKUP_VALUE),
    "tpi": _pickup("triforce_piece"),
    "wbi": _pickup("boomerang"),
    "wbi1": _pickup("boomerang"),
    "wbi2": _pickup("boomerang", upgraded=True),
}


def decode_entity(token: str, position: Point) -> EntityDescriptor | None:
    """Decode one grid token placed at grid ``position``.

    Raises ``UnknownTokenError`` for tokens outside the vocabulary.
    """
    try:
        build = _ENTITY_TOKENS[token]
    except KeyError as exc:
        raise UnknownTokenError(
            "Unknown entity token",
            row=position.y,
            column=position.x,
            token=token,
        ) from exc
    return build(position)


def entity_tokens() -> Iterable[str]:
    return _ENTITY_TOKENS.keys()
