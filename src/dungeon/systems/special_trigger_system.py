from __future__ import annotations

from esper import World

from dungeon.components.room_member import RoomMember
from dungeon.components.special_trigger import SpecialTrigger
from dungeon.events.bus import EVENT_TRIGGER_ACTIVATED, EVENT_TRIGGER_RELEASED, EventBus
from dungeon.systems.command_system import CommandSystem


class SpecialTriggerSystem:
    """Runs a trigger's registered effect when the player steps on it."""

    def __init__(self, world: World, event_bus: EventBus, command_system: CommandSystem) -> None:
        self.world = world
        self.event_bus = event_bus
        self.command_system = command_system
        self.event_bus.subscribe(EVENT_TRIGGER_ACTIVATED, self._on_activated)
        self.event_bus.subscribe(EVENT_TRIGGER_RELEASED, self._on_released)

    def _trigger(self, entity) -> SpecialTrigger | None:
        if entity is None or not self.world.entity_exists(entity):
            return None
        try:
            return self.world.component_for_entity(entity, SpecialTrigger)
        except KeyError:
            return None

    def _on_activated(self, sender, **payload) -> None:
        entity = payload.get("entity")
        trigger = self._trigger(entity)
        if trigger is None or trigger.spent or not trigger.armed:
            return
        if trigger.rearm:
            trigger.armed = False
        else:
            trigger.spent = True
        room_entity = self.world.component_for_entity(entity, RoomMember).room_entity
        self.command_system.execute(trigger.effect, room_entity)

    def _on_released(self, sender, **payload) -> None:
        trigger = self._trigger(payload.get("entity"))
        if trigger is None or not trigger.rearm:
            return
        trigger.armed = True
