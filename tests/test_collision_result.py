import pytest

from parkrush.collision_result import CollisionResult, CollisionType, EffectType


def test_no_collision_defaults():
    r = CollisionResult.no_collision()
    assert r.collision_type is CollisionType.NONE
    assert r.message == "No collision"
    assert not r.has_collision()
    assert r.score_change == 0 and r.damage == 0


def test_from_type_fatal_restarts():
    r = CollisionResult.from_type(CollisionType.FATAL_CRASH, -200, 100)
    assert r.should_restart
    assert r.effect_type is EffectType.EXPLOSION
    assert r.message == "Fatal collision!"


@pytest.mark.parametrize(
    "ctype, effect, message",
    [
        (CollisionType.HEAVY_DAMAGE, EffectType.CRASH, "Heavy damage sustained"),
        (CollisionType.MODERATE_DAMAGE, EffectType.SPARKS, "Moderate damage"),
        (CollisionType.MINOR_DAMAGE, EffectType.SPARKS, "Minor damage"),
        (CollisionType.BONUS_COLLECTED, EffectType.COLLECT_SOUND, "Bonus collected!"),
        (CollisionType.TRAFFIC_VIOLATION, EffectType.HONK, "Traffic violation"),
        (CollisionType.GOAL_REACHED, EffectType.NONE, "Collision occurred"),
    ],
)
def test_from_type_defaults(ctype, effect, message):
    r = CollisionResult.from_type(ctype, 7, 3)
    assert r.effect_type is effect
    assert r.message == message
    assert not r.should_restart
    assert r.score_change == 7 and r.damage == 3


def test_car_vs_parked_car():
    r = CollisionResult.car_vs_parked_car()
    assert (r.collision_type, r.score_change, r.damage, r.should_restart) == (
        CollisionType.HEAVY_DAMAGE, -100, 50, True)


def test_motorcycle_vs_parked_car():
    r = CollisionResult.motorcycle_vs_parked_car()
    assert r.score_change == -150 and r.damage == 75 and not r.should_restart


def test_truck_vs_parked_car():
    r = CollisionResult.truck_vs_parked_car()
    assert r.collision_type is CollisionType.FATAL_CRASH
    assert r.score_change == -200


def test_sidewalk_heavy_and_light():
    heavy = CollisionResult.vehicle_vs_sidewalk(True)
    light = CollisionResult.vehicle_vs_sidewalk(False)
    assert heavy.score_change == -50
    assert light.score_change == -25
    assert heavy.message == "Heavy vehicle on sidewalk - serious violation!"
    assert light.message == "Driving on sidewalk - traffic violation!"


def test_traffic_cone_evasion():
    assert CollisionResult.vehicle_vs_traffic_cone(True) == CollisionResult.motorcycle_evades_cone()
    evade = CollisionResult.motorcycle_evades_cone()
    assert evade.collision_type is CollisionType.EVASION_SUCCESS
    assert evade.score_change == 5


def test_traffic_cone_hit():
    r = CollisionResult.vehicle_vs_traffic_cone(False)
    assert r.message == "Hit traffic cone"
    assert r.damage == 10


def test_fatal_collision():
    r = CollisionResult.fatal_collision()
    assert r.should_restart
    assert r.message == "Fatal collision with pedestrian - level restart required!"


def test_power_up_collection():
    r = CollisionResult.power_up_collection("Shield")
    assert r.message == "Collected Shield power-up!"
    assert r.score_change == 100
    assert r.has_collision()


def test_type_string_matches_enum_name():
    for ctype in CollisionType:
        assert CollisionResult(ctype).type_string() == ctype.name


def test_debug_info():
    r = CollisionResult.no_collision()
    assert r.debug_info() == (
        "CollisionResult { Type: NONE, Score: 0, Damage: 0, Restart: NO, Message: 'No collision' }"
    )
    assert "Restart: YES" in CollisionResult.fatal_collision().debug_info()