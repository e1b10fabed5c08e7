from __future__ import annotations

from esper import World

from dungeon.components.spawn_cloud import SpawnCloud
from dungeon.events.bus import EVENT_ENEMY_REVEALED, EVENT_TICK, EventBus


class SpawnCloudSystem:
    """Counts down spawn clouds and reveals the enemy inside when they expire."""

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_TICK, self._on_tick)

    def _on_tick(self, sender, **payload) -> None:
        dt = float(payload.get("dt", 0.0) or 0.0)
        if dt <= 0:
            return
        expired: list[int] = []
        for entity, cloud in self.world.get_component(SpawnCloud):
            cloud.remaining -= dt
            if cloud.remaining <= 0:
                expired.append(entity)
        for entity in expired:
            self.world.remove_component(entity, SpawnCloud)
            self.event_bus.emit(EVENT_ENEMY_REVEALED, entity=entity)
