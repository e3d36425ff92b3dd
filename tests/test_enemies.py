import pytest

from rockblocks.defs import OBJ_DEAD, OBJ_NOEVENT, ObjId
from rockblocks.enemies import BehaviourState, EggMonster, ElecMan, FireMan, FireWall
from rockblocks.monster import Monster
from rockblocks.objects import ObjectManager
from rockblocks.projectiles import ElecBullet, FireStorm, SmallElecBullet


class FakeClock:
    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now


def world_with_player(x, y):
    objects = ObjectManager()
    player = Monster(x, y, 50.0)
    objects.add(ObjId.PLAYER, player)
    return objects, player


def test_fire_wall_rises_then_pauses():
    clock = FakeClock()
    wall = FireWall(clock=clock)
    wall.initialize()
    start = wall.info.y
    assert wall.update() == OBJ_NOEVENT
    assert wall.info.y == start - 1.0
    for _ in range(95):
        wall.update()
    assert wall.info.y == start - FireWall.RISE
    assert wall.idle
    assert not wall.moving_up


def test_fire_wall_resumes_after_pause_and_sinks():
    clock = FakeClock()
    wall = FireWall(clock=clock)
    wall.initialize()
    for _ in range(96):
        wall.update()
    top = wall.info.y
    wall.update()
    assert wall.info.y == top
    clock.now = FireWall.PAUSE_MS + 1
    wall.update()
    assert not wall.idle
    wall.update()
    assert wall.info.y == top + 1.0


def test_frozen_fire_wall_dies():
    wall = FireWall(clock=FakeClock())
    wall.initialize()
    wall.frozen = True
    assert wall.update() == OBJ_DEAD


def test_egg_patrol_stays_within_bounds():
    objects, _ = world_with_player(0.0, 5000.0)
    egg = EggMonster(objects)
    egg.initialize()
    egg.update()
    assert egg.info.y == egg.max_y
    for _ in range(1000):
        egg.update()
        assert egg.min_y <= egg.info.y <= egg.max_y


def test_egg_idle_when_player_far():
    objects, _ = world_with_player(0.0, 5000.0)
    egg = EggMonster(objects)
    egg.initialize()
    egg.update()
    egg.late_update()
    assert egg.state is BehaviourState.IDLE
    assert egg.frame == EggMonster.MOVE


def test_egg_attack_cycle_fires_two_sparks():
    objects, player = world_with_player(0.0, 5000.0)
    egg = EggMonster(objects)
    egg.initialize()
    egg.update()
    egg.late_update()
    egg.speed = 0.0
    player.info.y = egg.info.y
    for _ in range(40):
        egg.update()
        egg.late_update()
    assert egg.state is BehaviourState.ATTACK
    assert egg.frame == EggMonster.ATTACK1
    for _ in range(20):
        egg.update()
        egg.late_update()
    assert egg.frame == EggMonster.ATTACK2
    sparks = objects.objects(ObjId.BULLET)
    assert len(sparks) == 2
    assert all(isinstance(s, SmallElecBullet) for s in sparks)
    assert sorted(s.info.y for s in sparks) == [egg.info.y - 35.0, egg.info.y + 35.0]
    assert all(s.angle == 180.0 for s in sparks)


def test_egg_distance_is_vertical():
    objects, player = world_with_player(1000.0, 450.0)
    egg = EggMonster(objects)
    egg.initialize()
    egg.info.y = 300.0
    assert egg.distance() == 150.0


def test_elecman_health():
    objects, _ = world_with_player(5000.0, 350.0)
    boss = ElecMan(objects)
    boss.initialize()
    assert boss.hp == 100.0
    boss.damage = 30.0
    assert boss.hp == 70.0


def test_elecman_idle_when_far():
    objects, _ = world_with_player(5000.0, 350.0)
    boss = ElecMan(objects)
    boss.initialize()
    boss.update()
    boss.late_update()
    assert boss.state is BehaviourState.IDLE
    assert boss.frame == ElecMan.IDLE
    assert boss.info.x == 300.0


def test_elecman_chases_toward_player():
    objects, _ = world_with_player(500.0, 350.0)
    boss = ElecMan(objects)
    boss.initialize()
    boss.update()
    assert boss.state is BehaviourState.CHASE
    assert boss.info.x == 303.0
    boss.late_update()
    assert boss.frame == ElecMan.CHASE


def test_elecman_attack_throws_bolt():
    objects, player = world_with_player(500.0, 350.0)
    boss = ElecMan(objects)
    boss.initialize()
    boss.update()
    boss.late_update()
    player.info.x = boss.info.x
    for _ in range(30):
        boss.update()
        boss.late_update()
    assert boss.state is BehaviourState.ATTACK
    assert boss.frame == ElecMan.ATTACK2
    assert objects.objects(ObjId.BULLET) == []
    for _ in range(30):
        boss.update()
        boss.late_update()
    bolts = objects.objects(ObjId.BULLET)
    assert len(bolts) == 1
    assert isinstance(bolts[0], ElecBullet)
    assert (bolts[0].info.x, bolts[0].info.y) == (boss.info.x, boss.info.y)
    assert boss.frame == ElecMan.ATTACK1


def test_fireman_health():
    objects, _ = world_with_player(0.0, 0.0)
    boss = FireMan(objects, clock=FakeClock())
    boss.initialize()
    assert boss.hp == 10.0


def test_fireman_backs_away_from_close_player():
    objects, _ = world_with_player(3900.0, 2200.0)
    boss = FireMan(objects, clock=FakeClock())
    boss.initialize()
    boss.update()
    assert boss.info.x == 3800.0 - boss.speed
    assert objects.objects(ObjId.BULLET) == []


@pytest.mark.parametrize("player_x", [3300.0, 4300.0])
def test_fireman_fires_after_interval(player_x):
    clock = FakeClock()
    objects, _ = world_with_player(player_x, 2200.0)
    boss = FireMan(objects, clock=clock)
    boss.initialize()
    boss.update()
    assert objects.objects(ObjId.BULLET) == []
    clock.now = FireMan.FIRE_INTERVAL_MS + 1
    boss.update()
    flames = objects.objects(ObjId.BULLET)
    assert len(flames) == 1
    assert isinstance(flames[0], FireStorm)
    assert (flames[0].info.x, flames[0].info.y) == (boss.info.x, boss.info.y)
    boss.update()
    assert len(objects.objects(ObjId.BULLET)) == 1


def test_fireman_does_not_fire_out_of_reach():
    clock = FakeClock()
    objects, _ = world_with_player(100.0, 2200.0)
    boss = FireMan(objects, clock=clock)
    boss.initialize()
    clock.now = 10_000
    boss.update()
    assert objects.objects(ObjId.BULLET) == []