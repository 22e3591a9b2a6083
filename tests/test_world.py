"""
World bookkeeping, food helpers and event records.
"""

import config
from world.events import Event, EventLog
from world.food import Food, first_within_reach, touch_scatter
from world.world import World, numeric_traits


def test_numeric_traits_filter():
    assert numeric_traits(None) == {}
    assert numeric_traits({"a": 1, "b": 2.5, "c": "x", "d": False, "e": None}) == {"a": 1.0, "b": 2.5}


def test_new_organism_defaults(world):
    org = world.new_organism()
    assert org in world.organisms
    assert org.dna == [config.BASE_COLOR]
    assert 0.0 <= org.x <= world.w and 0.0 <= org.y <= world.h
    assert world.births == 0


def test_new_organism_copies_dna(world):
    dna = ["#123456"]
    org = world.new_organism(dna=dna)
    dna.append("#ffffff")
    assert org.dna == ["#123456"]


def test_take_food_preserves_order(world):
    for x in (1.0, 2.0, 3.0):
        world.spawn_food_at(x, 0.0, energy=0.5)
    taken = world.take_food(1)
    assert taken.x == 2.0
    assert [f.x for f in world.foods] == [1.0, 3.0]


def test_first_within_reach_is_strict():
    foods = [Food("a", 10.0, 0.0, 1.0), Food("b", 9.0, 0.0, 1.0)]
    assert first_within_reach(foods, 0.0, 0.0, 10.0) == 1
    assert first_within_reach(foods, 0.0, 0.0, 5.0) is None


def test_touch_scatter_bounds():
    points = touch_scatter(50.0, 60.0, n=25, jitter=4.0)
    assert len(points) == 25
    assert all(46.0 <= x <= 54.0 and 56.0 <= y <= 64.0 for x, y in points)


def test_event_dicts_omit_empty_subjects():
    spawn = Event.birth("c1").to_dict()
    assert set(spawn) == {"type", "child", "at"}
    born = Event.birth("c2", "p1").to_dict()
    assert (born["parent"], born["child"]) == ("p1", "c2")
    mutation = Event.mutation("c2", ["#000000"]).to_dict()
    assert mutation["dna"] == ["#000000"]
    assert isinstance(mutation["at"], int)


def test_event_log_unbounded_by_default():
    log = EventLog()
    for i in range(50):
        log.append(Event.death(f"o{i}"))
    assert len(log) == 50
    assert EventLog(0).limit is None


def test_event_log_negative_limit_is_unbounded():
    log = EventLog(-1)
    assert log.limit is None
    for i in range(5):
        log.append(Event.death(f"o{i}"))
    assert len(log) == 5
