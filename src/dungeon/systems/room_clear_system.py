from __future__ import annotations

import logging

from esper import World

from dungeon.components.enemy import Enemy
from dungeon.components.room import Room
from dungeon.components.room_member import RoomMember
from dungeon.events.bus import (
    EVENT_ENEMY_DEFEATED,
    EVENT_ROOM_CLEARED,
    EVENT_ROOM_SPAWNED,
    EventBus,
)
from dungeon.systems.command_system import CommandSystem

logger = logging.getLogger(__name__)


class RoomClearSystem:
    """Marks a room cleared once no living enemy remains and runs its clear effects."""

    def __init__(self, world: World, event_bus: EventBus, command_system: CommandSystem) -> None:
        self.world = world
        self.event_bus = event_bus
        self.command_system = command_system
        self.event_bus.subscribe(EVENT_ROOM_SPAWNED, self._on_room_spawned)
        self.event_bus.subscribe(EVENT_ENEMY_DEFEATED, self._on_enemy_defeated)

    def _on_room_spawned(self, sender, **payload) -> None:
        room_entity = payload.get("room_entity")
        if room_entity is not None:
            self.check_room(room_entity)

    def _on_enemy_defeated(self, sender, **payload) -> None:
        entity = payload.get("entity")
        if entity is None or not self.world.entity_exists(entity):
            return
        try:
            enemy = self.world.component_for_entity(entity, Enemy)
            member = self.world.component_for_entity(entity, RoomMember)
        except KeyError:
            return
        enemy.defeated = True
        self.check_room(member.room_entity)

    def living_enemies(self, room_entity: int) -> list[int]:
        return [
            entity
            for entity, (enemy, member) in self.world.get_components(Enemy, RoomMember)
            if member.room_entity == room_entity and not enemy.defeated
        ]

    def check_room(self, room_entity: int) -> bool:
        """Clear ``room_entity`` if it has no living enemies; returns whether it is cleared."""
        try:
            room = self.world.component_for_entity(room_entity, Room)
        except KeyError:
            return False
        if room.cleared:
            return True
        if self.living_enemies(room_entity):
            return False
        room.cleared = True
        logger.debug("Room %d cleared, running %d effect(s)", room_entity, len(room.clear_effects))
        self.event_bus.emit(EVENT_ROOM_CLEARED, room_entity=room_entity)
        for command in room.clear_effects:
            self.command_system.execute(command, room_entity)
        return True
