from esper import World

from dungeon.components.held_pickup import HeldPickup
from dungeon.components.pickup import Pickup
from dungeon.components.placement import Placement
from dungeon.components.room_member import RoomMember
from dungeon.events.bus import EVENT_ENEMY_DEFEATED, EVENT_PICKUP_RELEASED, EventBus
from dungeon.factories.rooms import spawn_room
from dungeon.layout.loader import decode_room
from dungeon.systems.item_holder_system import ItemHolderSystem

from tests.helpers import room_lines


def _setup(cells):
    bus = EventBus()
    world = World()
    ItemHolderSystem(world, bus)
    room_entity = spawn_room(world, bus, decode_room(room_lines(cells)))
    released = []
    bus.subscribe(EVENT_PICKUP_RELEASED, lambda sender, **payload: released.append(payload))
    return bus, world, room_entity, released


def test_holder_drops_pickup_where_it_dies():
    bus, world, room_entity, released = _setup({(6, 4): "gmb;hi"})
    (holder, _), = world.get_component(HeldPickup)
    holder_box = world.component_for_entity(holder, Placement).box

    bus.emit(EVENT_ENEMY_DEFEATED, entity=holder)

    (pickup_entity, pickup), = world.get_component(Pickup)
    assert pickup.kind == "heart"
    assert world.component_for_entity(pickup_entity, Placement).box == holder_box
    assert world.component_for_entity(pickup_entity, RoomMember).room_entity == room_entity
    assert not world.has_component(holder, HeldPickup)
    assert released == [{"holder_entity": holder, "pickup_entity": pickup_entity, "kind": "heart"}]


def test_holder_drops_only_once():
    bus, world, _, released = _setup({(6, 4): "gre;ki"})
    (holder, _), = world.get_component(HeldPickup)

    bus.emit(EVENT_ENEMY_DEFEATED, entity=holder)
    bus.emit(EVENT_ENEMY_DEFEATED, entity=holder)

    assert len(released) == 1
    assert len(list(world.get_component(Pickup))) == 1


def test_plain_enemy_drops_nothing():
    bus, world, _, released = _setup({(1, 1): "gmb"})
    bus.emit(EVENT_ENEMY_DEFEATED, entity=999)
    for entity, _ in list(world.get_component(Placement)):
        bus.emit(EVENT_ENEMY_DEFEATED, entity=entity)
    assert released == []
    assert list(world.get_component(Pickup)) == []
