from __future__ import annotations

import logging
from typing import Callable

from esper import World

from dungeon.components.door_state import DoorState
from dungeon.components.geometry import Box
from dungeon.components.room import Room
from dungeon.constants import ITEM_SPAWN_TILE, ROOM_ORIGIN, TILE_SIZE
from dungeon.events.bus import (
    EVENT_COMMAND_EXECUTED,
    EVENT_DOOR_STATE_CHANGED,
    EVENT_ENTITY_SPAWNED,
    EVENT_MUSIC_PLAY,
    EVENT_MUSIC_STOP,
    EVENT_PLAYER_TELEPORT,
    EVENT_SOUND_PLAY,
    EventBus,
)
from dungeon.factories.room_entities import create_room_entity, descriptor_kind
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
from dungeon.layout.descriptors import SpawnCloudDescriptor
from dungeon.utils.rounding import round_half_away_from_zero

logger = logging.getLogger(__name__)


class CommandSystem:
    """Executes decoded commands against a room entity.

    Commands carry no references of their own; the room they act on and the
    tile where deferred spawns land are supplied at execution time.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        tile_size: int = TILE_SIZE,
        origin: tuple[int, int] = ROOM_ORIGIN,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self.tile_size = tile_size
        self.origin = origin
        self._handlers: dict[type, Callable[..., None]] = {
            TeleportLink: self._teleport,
            SetDoorOpen: self._open_door,
            StopMusic: self._stop_music,
            PlayMusic: self._play_music,
            PlaySound: self._play_sound,
            SpawnPickup: self._spawn_pickup,
            SpawnEnemy: self._spawn_enemy,
            NoOp: self._noop,
        }

    def execute(
        self,
        command: Command,
        room_entity: int | None = None,
        *,
        spawn_tile: tuple[float, float] | None = None,
    ) -> None:
        try:
            handler = self._handlers[type(command)]
        except KeyError as exc:
            raise TypeError(f"Unsupported command {command!r}") from exc
        logger.debug("Executing %r in room %s", command, room_entity)
        handler(command, room_entity, spawn_tile or ITEM_SPAWN_TILE)
        self.event_bus.emit(EVENT_COMMAND_EXECUTED, command=command, room_entity=room_entity)

    def spawn_box(self, tile: tuple[float, float]) -> Box:
        ox, oy = self.origin
        return Box(
            x=ox + round_half_away_from_zero(tile[0] * self.tile_size),
            y=oy + round_half_away_from_zero(tile[1] * self.tile_size),
            width=self.tile_size,
            height=self.tile_size,
        )

    def _room(self, room_entity: int | None) -> Room:
        if room_entity is None:
            raise ValueError("Command requires a room entity")
        return self.world.component_for_entity(room_entity, Room)

    def _teleport(self, command: TeleportLink, room_entity, spawn_tile) -> None:
        self.event_bus.emit(
            EVENT_PLAYER_TELEPORT,
            direction=command.direction,
            animation=command.animation,
        )

    def _open_door(self, command: SetDoorOpen, room_entity, spawn_tile) -> None:
        room = self._room(room_entity)
        index = command.direction.value
        previous = room.doors[index]
        room.doors[index] = DoorState.OPEN
        if previous != DoorState.OPEN:
            self.event_bus.emit(
                EVENT_DOOR_STATE_CHANGED,
                room_entity=room_entity,
                direction=command.direction,
                previous=previous,
                state=DoorState.OPEN,
            )

    def _stop_music(self, command: StopMusic, room_entity, spawn_tile) -> None:
        self.event_bus.emit(EVENT_MUSIC_STOP)

    def _play_music(self, command: PlayMusic, room_entity, spawn_tile) -> None:
        self.event_bus.emit(EVENT_MUSIC_PLAY, track=command.track)

    def _play_sound(self, command: PlaySound, room_entity, spawn_tile) -> None:
        self.event_bus.emit(EVENT_SOUND_PLAY, effect=command.effect)

    def _spawn_pickup(self, command: SpawnPickup, room_entity, spawn_tile) -> None:
        self._spawn(command.template, room_entity, spawn_tile)

    def _spawn_enemy(self, command: SpawnEnemy, room_entity, spawn_tile) -> None:
        self._spawn(SpawnCloudDescriptor(command.template), room_entity, spawn_tile)

    def _spawn(self, descriptor, room_entity, spawn_tile) -> None:
        self._room(room_entity)
        entity = create_room_entity(
            self.world,
            descriptor,
            self.spawn_box(spawn_tile),
            room_entity=room_entity,
        )
        self.event_bus.emit(
            EVENT_ENTITY_SPAWNED,
            entity=entity,
            room_entity=room_entity,
            kind=descriptor_kind(descriptor),
        )

    def _noop(self, command: NoOp, room_entity, spawn_tile) -> None:
        return None
