import io
import random

from skirmish.commands import CreateMap, March, SpawnHunter, SpawnSwordsman, Tick
from skirmish.coordinates import Position
from skirmish.event_log import EventLog
from skirmish.simulation import Simulation, SimulationStatus


def make_sim():
    out = io.StringIO()
    return out, Simulation(EventLog(out), random.Random(1))


def run_to_end(sim, limit=100):
    for _ in range(limit):
        sim.command(Tick())
        if sim.status().finished:
            return sim.status()
    raise AssertionError("simulation did not finish")


def test_tick_without_map_finishes():
    out, sim = make_sim()
    sim.command(Tick())
    assert sim.status().finished is True
    assert "Simulation::Tick field is not created." in out.getvalue()


def test_create_map_logs_event():
    out, sim = make_sim()
    sim.command(CreateMap(width=10, height=10))
    assert out.getvalue() == "[0] MAP_CREATED width=10 height=10 \n"
    assert sim.field.width == 10


def test_create_map_twice():
    out, sim = make_sim()
    sim.command(CreateMap(width=4, height=4))
    sim.command(CreateMap(width=8, height=8))
    assert "Simulation::CreateMap we try to create map twice." in out.getvalue()
    assert sim.field.width == 4


def test_create_map_bad_size():
    out, sim = make_sim()
    sim.command(CreateMap(width=0, height=5))
    assert "Simulation::CreateMap incorrect sizes." in out.getvalue()
    assert sim.field is None


def test_unknown_command():
    out, sim = make_sim()
    sim.command("nonsense")
    assert "Simulation::command type not found." in out.getvalue()


def test_march_before_map():
    out, sim = make_sim()
    sim.command(March(unit_id=1, target_x=2, target_y=2))
    assert "Simulation::March field is not created." in out.getvalue()


def test_spawn_before_map():
    out, sim = make_sim()
    sim.command(SpawnSwordsman(unit_id=1, x=0, y=0, hp=5, strength=1))
    assert "Can not spawn unit without field" in out.getvalue()
    assert 1 not in sim.heap


def test_march_reaches_target():
    out, sim = make_sim()
    sim.command(CreateMap(width=10, height=10))
    sim.command(SpawnSwordsman(unit_id=1, x=0, y=0, hp=5, strength=1))
    sim.command(March(unit_id=1, target_x=3, target_y=0))
    status = run_to_end(sim)
    assert sim.field.position_of(1) == Position(3, 0)
    assert "MARCH_ENDED unitId=1 x=3 y=0 " in out.getvalue()
    assert status.finished is True
    assert status.tick == 3


def test_melee_fight_kills_and_clears():
    out, sim = make_sim()
    sim.command(CreateMap(width=5, height=5))
    sim.command(SpawnSwordsman(unit_id=1, x=1, y=1, hp=5, strength=5))
    sim.command(SpawnSwordsman(unit_id=2, x=2, y=1, hp=5, strength=5))
    run_to_end(sim)
    text = out.getvalue()
    assert "UNIT_ATTACKED attackerUnitId=1 targetUnitId=2 damage=5 targetHp=0 " in text
    assert "UNIT_DIED unitId=2 " in text
    assert 2 not in sim.heap
    assert 1 in sim.heap


def test_hunter_shoots_at_range():
    out, sim = make_sim()
    sim.command(CreateMap(width=6, height=6))
    sim.command(SpawnHunter(unit_id=1, x=0, y=0, hp=5, agility=2, strength=1, range=3))
    sim.command(SpawnSwordsman(unit_id=2, x=2, y=0, hp=50, strength=1))
    sim.command(Tick())
    assert "UNIT_ATTACKED attackerUnitId=1 targetUnitId=2 damage=2 " in out.getvalue()


def test_status_is_a_copy():
    out, sim = make_sim()
    copy = sim.status()
    copy.finished = True
    copy.tick = 99
    assert sim.status() == SimulationStatus()