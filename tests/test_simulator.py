import logging

from foxes_rabbits.config import DEFAULT_DEPTH, DEFAULT_WIDTH, LONG_RUN_STEPS
from foxes_rabbits.simulator import Simulator
from foxes_rabbits.species import RABBIT, SPECIES
from foxes_rabbits.view import HeadlessView

from helpers import check_invariants, empty_simulator, place


class SpyView:
    """Viable for the first ``viable_for`` checks, records every snapshot."""

    def __init__(self, viable_for=None):
        self.viable_for = viable_for
        self.checks = 0
        self.snapshots = []
        self.colors = {}

    def set_color(self, tag, color):
        self.colors[tag] = color

    def show_status(self, step, field):
        self.snapshots.append((step, len(field)))

    def is_viable(self, field):
        self.checks += 1
        return self.viable_for is None or self.checks <= self.viable_for


def snapshot(sim):
    return [(a.species.tag, a.location, a.age, getattr(a, "food_level", None)) for a in sim.animals]


def test_reset_populates_and_reports():
    view = SpyView()
    sim = Simulator(20, 30, view=view, seed=1)
    assert sim.step == 0
    assert view.snapshots == [(0, len(sim.animals))]
    assert view.colors == {sp.tag: sp.color for sp in SPECIES}
    assert 0 < len(sim.animals) < 20 * 30
    check_invariants(sim)


def test_invariants_hold_every_step():
    sim = Simulator(25, 25, view=HeadlessView(SPECIES, min_species=0), seed=5)
    ever_seen = {}
    ages = {}
    for _ in range(60):
        before = {id(a) for a in sim.animals}
        sim.simulate_one_step()
        check_invariants(sim)

        for animal in sim.animals:
            ever_seen[id(animal)] = animal
            if id(animal) not in before:
                # newborns did not act in the step they were born
                assert animal.age == 0
            assert animal.age >= ages.get(id(animal), 0)
            ages[id(animal)] = animal.age
        # dead animals never come back
        roster = {id(a) for a in sim.animals}
        for key, animal in ever_seen.items():
            if key not in roster:
                assert not animal.alive
        assert all(a.alive for a in sim.animals)


def test_newborns_join_roster_after_the_pass():
    sim = empty_simulator(5, 5, rabbit={"breeding_probability": 1.0})
    parent = place(sim, "rabbit", 2, 2, age=10)
    sim.simulate_one_step()
    assert sim.animals[0] is parent
    newborns = sim.animals[1:]
    assert newborns and all(a.age == 0 for a in newborns)
    sim.simulate_one_step()
    assert all(a.age == 1 for a in newborns if a.alive)


def test_reset_with_seed_is_repeatable():
    sim = Simulator(15, 15, seed=11)
    first = snapshot(sim)
    sim.simulate(10)
    sim.reset()
    assert sim.step == 0
    assert snapshot(sim) == first
    sim.reset()
    assert snapshot(sim) == first


def test_same_seed_same_run():
    a = Simulator(20, 20, view=HeadlessView(SPECIES, min_species=0), seed=99)
    b = Simulator(20, 20, view=HeadlessView(SPECIES, min_species=0), seed=99)
    a.simulate(25)
    b.simulate(25)
    assert snapshot(a) == snapshot(b)
    assert a.view.to_frame().equals(b.view.to_frame())


def test_invalid_dimensions_fall_back_to_defaults(caplog):
    with caplog.at_level(logging.WARNING, logger="foxes_rabbits.simulator"):
        sim = Simulator(0, -4, view=SpyView(), seed=1)
    assert (sim.field.depth, sim.field.width) == (DEFAULT_DEPTH, DEFAULT_WIDTH)
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "Using default values" in warnings[0].getMessage()


def test_prey_only_world_is_never_viable():
    sim = Simulator(10, 10, registry=(RABBIT,), seed=2)
    assert sim.simulate(1000) == 0
    assert sim.step == 0


def test_simulate_stops_when_view_gives_up():
    view = SpyView(viable_for=3)
    sim = Simulator(10, 10, view=view, seed=2)
    assert sim.simulate(1000) == 3
    assert sim.step == 3
    assert [s for s, _ in view.snapshots] == [0, 1, 2, 3]


def test_simulate_runs_requested_steps_while_viable():
    sim = Simulator(10, 10, view=SpyView(), seed=2)
    assert sim.simulate(7) == 7
    assert sim.step == 7


def test_run_long_simulation():
    view = SpyView()
    sim = Simulator(4, 4, view=view, seed=8)
    assert sim.run_long_simulation() == LONG_RUN_STEPS
    assert sim.step == LONG_RUN_STEPS
    assert len(view.snapshots) == LONG_RUN_STEPS + 1


def test_population_bound_on_crowded_torus():
    sim = empty_simulator(4, 4, rabbit={"breeding_probability": 1.0, "breeding_age": 0})
    sim.field.torus = True
    place(sim, "rabbit", 0, 0)
    for _ in range(10):
        sim.simulate_one_step()
        check_invariants(sim)
        assert len(sim.animals) <= 16


def test_population_counts_match_roster():
    sim = Simulator(12, 12, seed=4)
    counts = sim.population()
    assert sum(counts.values()) == len(sim.animals)
    assert counts["rabbit"] == sum(1 for a in sim.animals if a.species.tag == "rabbit")
