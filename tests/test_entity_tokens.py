import pytest

from dungeon.components.geometry import Point
from dungeon.errors import UnknownTokenError
from dungeon.layout.descriptors import (
    BlockDescriptor,
    EnemyDescriptor,
    MenuMarkerDescriptor,
    PickupDescriptor,
    SpecialTriggerDescriptor,
)
from dungeon.layout.entity_tokens import decode_entity, entity_tokens


def test_empty_token_decodes_to_nothing():
    assert decode_entity("", Point(0, 0)) is None


def test_enemy_token_carries_position():
    assert decode_entity("gmb", Point(3, 4)) == EnemyDescriptor("goomba", Point(3, 4))


def test_goriya_tokens_differ_by_variant():
    red = decode_entity("gre", Point(1, 1))
    blue = decode_entity("gbe", Point(1, 1))
    assert red.kind == blue.kind == "goriya"
    assert (red.variant, blue.variant) == ("red", "blue")


def test_trigger_tokens_differ_only_in_rearm_flag():
    one_shot = decode_entity("spt", Point(2, 2))
    rearming = decode_entity("sptr", Point(2, 2))
    assert isinstance(one_shot, SpecialTriggerDescriptor)
    assert isinstance(rearming, SpecialTriggerDescriptor)
    assert not one_shot.rearm
    assert rearming.rearm
    assert one_shot.effect is None


def test_pushable_blocks_are_flagged():
    assert decode_entity("pb1", Point(0, 0)) == BlockDescriptor("pushable_1", Point(0, 0), pushable=True)
    assert decode_entity("npb", Point(0, 0)).pushable is False


def test_pickup_flags():
    rupee = decode_entity("ri", Point(5, 5))
    assert isinstance(rupee, PickupDescriptor)
    assert rupee.value == 10
    assert decode_entity("coi", Point(0, 0)).holds_up
    assert not decode_entity("fi", Point(0, 0)).holds_up
    assert decode_entity("wbi2", Point(0, 0)).upgraded
    assert decode_entity("wbi", Point(0, 0)) == decode_entity("wbi1", Point(0, 0))


def test_menu_marker_carries_font():
    marker = decode_entity("mm", Point(7, 2))
    assert isinstance(marker, MenuMarkerDescriptor)
    assert marker.font


def test_decoding_is_deterministic_over_whole_vocabulary():
    for token in entity_tokens():
        first = decode_entity(token, Point(4, 9))
        second = decode_entity(token, Point(4, 9))
        assert first == second


def test_unknown_token_is_fatal_and_located():
    with pytest.raises(UnknownTokenError) as excinfo:
        decode_entity("zzz", Point(3, 7))
    err = excinfo.value
    assert (err.token, err.column, err.row) == ("zzz", 3, 7)
    assert "zzz" in str(err)


def test_effect_only_tokens_are_not_entities():
    with pytest.raises(UnknownTokenError):
        decode_entity("tu", Point(0, 0))
