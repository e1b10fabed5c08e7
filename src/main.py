"""Entry point for the dungeon room viewer.

Loads one room description, spawns it into an ECS world, and draws it with arcade.
"""
import logging
import sys
from pathlib import Path

from arcade import Window, run, set_background_color, color
import arcade

from dungeon.constants import WINDOW_HEIGHT, WINDOW_WIDTH
from dungeon.events.bus import EVENT_TICK, EventBus
from dungeon.factories.rooms import spawn_room
from dungeon.layout.loader import load_room
from dungeon.rendering.room_renderer import RoomRenderContext, RoomRenderer
from dungeon.world import create_room_systems, create_world

DEFAULT_ROOM = Path(__file__).parent / "dungeon" / "data" / "rooms" / "room_2_5.csv"


class DungeonWindow(Window):
    def __init__(self, room_path: Path):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, "Dungeon")
        self.set_update_rate(1/60)
        self.event_bus = EventBus()
        self.world = create_world()
        self.systems = create_room_systems(self.world, self.event_bus)
        self.room_entity = spawn_room(self.world, self.event_bus, load_room(room_path))
        self.room_renderer = RoomRenderer(self.world)
        set_background_color(color.BLACK)

    def on_draw(self):
        self.clear()
        ctx = RoomRenderContext(window_width=self.width, window_height=self.height)
        self.room_renderer.render(arcade, ctx)

    def on_update(self, delta_time: float):
        self.event_bus.emit(EVENT_TICK, dt=delta_time)


def main():
    logging.basicConfig(level=logging.INFO)
    room_path = Path(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_ROOM
    window = DungeonWindow(room_path)
    run()

if __name__ == "__main__":
    main()
