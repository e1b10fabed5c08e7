from __future__ import annotations

import logging

from esper import World

from dungeon.components.held_pickup import HeldPickup
from dungeon.components.placement import Placement
from dungeon.components.room_member import RoomMember
from dungeon.events.bus import EVENT_ENEMY_DEFEATED, EVENT_PICKUP_RELEASED, EventBus
from dungeon.factories.room_entities import create_room_entity

logger = logging.getLogger(__name__)


class ItemHolderSystem:
    """Drops the pickup an enemy was carrying at the spot where it was defeated."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_ENEMY_DEFEATED, self._on_enemy_defeated)

    def _on_enemy_defeated(self, sender, **payload) -> None:
        entity = payload.get("entity")
        if entity is None or not self.world.entity_exists(entity):
            return
        if not self.world.has_component(entity, HeldPickup):
            return
        held = self.world.component_for_entity(entity, HeldPickup)
        box = self.world.component_for_entity(entity, Placement).box
        member = self.world.component_for_entity(entity, RoomMember)
        self.world.remove_component(entity, HeldPickup)
        pickup_entity = create_room_entity(
            self.world,
            held.pickup,
            box,
            room_entity=member.room_entity,
        )
        logger.debug("Enemy %d released %s as entity %d", entity, held.pickup.kind, pickup_entity)
        self.event_bus.emit(
            EVENT_PICKUP_RELEASED,
            holder_entity=entity,
            pickup_entity=pickup_entity,
            kind=held.pickup.kind,
        )
