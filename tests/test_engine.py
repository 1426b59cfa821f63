from __future__ import annotations

import random
from collections import Counter

import pytest

from sorteador.contracts import DrawSettings, Position, RosterValidationError, Slot, ValidationResult
from sorteador.core import DrawIntegrityError, seeded_random
from sorteador.draw import TeamAssigner, build_slots, positions_for

from tests.helpers import SELECTIONS, filled_slots, position_counts


class _PermissiveValidator:
    def require_ready(self, slots, positions) -> None:
        return None

    def validate(self, slots, positions) -> ValidationResult:
        return ValidationResult(ok=True, issues=[])


@pytest.mark.parametrize("game_format,variant", SELECTIONS)
@pytest.mark.parametrize("seed", [1, 7, 42, 2024])
def test_every_position_quota_is_met_exactly(game_format, variant, seed):
    positions = positions_for(game_format, variant)
    first, second = TeamAssigner(seeded_random(seed)).assign(filled_slots(positions), positions)
    expected = Counter({p.name: p.quantity_per_team for p in positions})
    assert position_counts(first) == expected
    assert position_counts(second) == expected


@pytest.mark.parametrize("game_format,variant", SELECTIONS)
def test_teams_partition_the_pool(game_format, variant):
    positions = positions_for(game_format, variant)
    slots = filled_slots(positions)
    first, second = TeamAssigner(seeded_random(3)).assign(slots, positions)
    drawn = Counter((p.name, p.position) for p in first.players + second.players)
    assert drawn == Counter((s.name, s.position) for s in slots)


def test_society_scenario():
    positions = positions_for("society")
    slots = filled_slots(positions)
    assert len(slots) == 14
    first, second = TeamAssigner(seeded_random(11)).assign(slots, positions)
    assert len(first.players) == len(second.players) == 7
    for team in (first, second):
        assert [team.count_at(p.name) for p in positions] == [1, 1, 2, 2, 1]


def test_futsal_formation1_scenario():
    positions = positions_for("futsal", "formation1")
    first, second = TeamAssigner(seeded_random(5)).assign(filled_slots(positions), positions)
    assert len(first.players) == len(second.players) == 5
    assert position_counts(first) == Counter({"Goleiro": 1, "Ala": 2, "Fixo": 1, "Pivô": 1})


def test_names_are_trimmed_and_teams_labelled():
    positions = positions_for("futsal", "formation2")
    slots = filled_slots(positions)
    slots[0].name = "   Taffarel  "
    settings = DrawSettings(team_names=("Casa", "Visitante"))
    first, second = TeamAssigner(seeded_random(9), settings=settings).assign(slots, positions)
    assert (first.name, second.name) == ("Casa", "Visitante")
    assert "Taffarel" in {p.name for p in first.players + second.players}


def test_default_team_labels():
    positions = positions_for("society")
    first, second = TeamAssigner(seeded_random(9)).assign(filled_slots(positions), positions)
    assert (first.name, second.name) == ("Time Azul", "Time Vermelho")


def test_rosters_sorted_by_catalog_order_then_name():
    positions = positions_for("society")
    slots = build_slots(positions)
    names = ["Zé", "Ana", "Caio", "Bruno", "Lia", "Davi", "Edu", "Beto", "Rui", "Ivo", "Gil", "Hugo", "Téo", "Alan"]
    for slot, name in zip(slots, names):
        slot.name = name
    order = {p.name: i for i, p in enumerate(positions)}
    for seed in range(25):
        for team in TeamAssigner(seeded_random(seed)).assign(slots, positions):
            keys = [(order[p.position], p.name) for p in team.players]
            assert keys == sorted(keys)


def test_sorted_roster_independent_of_input_order():
    positions = positions_for("futsal", "formation1")
    order = {p.name: i for i, p in enumerate(positions)}
    base = filled_slots(positions)
    shuffler = random.Random(8)
    for _ in range(30):
        reordered = list(base)
        shuffler.shuffle(reordered)
        for team in TeamAssigner(seeded_random(0)).assign(reordered, positions):
            keys = [(order[p.position], p.name) for p in team.players]
            assert keys == sorted(keys)


def test_repeated_runs_keep_invariants_and_vary():
    positions = positions_for("society")
    slots = filled_slots(positions)
    assigner = TeamAssigner(seeded_random(100))
    groupings = set()
    expected = Counter({p.name: p.quantity_per_team for p in positions})
    for _ in range(20):
        first, second = assigner.assign(slots, positions)
        assert position_counts(first) == position_counts(second) == expected
        groupings.add(frozenset(p.name for p in first.players))
    assert len(groupings) > 1


def test_coin_flip_is_unbiased_between_teams():
    positions = positions_for("futsal", "formation1")
    slots = filled_slots(positions)
    goalkeeper = slots[0].name
    assigner = TeamAssigner(seeded_random(2026))
    runs = 4000
    on_first = sum(
        1 for _ in range(runs) if goalkeeper in {p.name for p in assigner.assign(slots, positions)[0].players}
    )
    assert 0.45 < on_first / runs < 0.55


def test_pool_is_not_mutated():
    positions = positions_for("society")
    slots = filled_slots(positions)
    before = [(s.position, s.name) for s in slots]
    TeamAssigner(seeded_random(4)).assign(slots, positions)
    assert [(s.position, s.name) for s in slots] == before


@pytest.mark.parametrize("game_format,variant", SELECTIONS)
def test_incomplete_pool_is_rejected(game_format, variant):
    positions = positions_for(game_format, variant)
    slots = filled_slots(positions)
    slots[-1].name = "  "
    with pytest.raises(RosterValidationError) as ex:
        TeamAssigner(seeded_random(1)).assign(slots, positions)
    assert ex.value.missing == 1
    assert ex.value.required == len(slots)
    assert "ROSTER_INCOMPLETE" in {i.code for i in ex.value.issues}


def test_short_pool_is_rejected():
    positions = positions_for("futsal", "formation1")
    slots = filled_slots(positions)[:-2]
    with pytest.raises(RosterValidationError) as ex:
        TeamAssigner(seeded_random(1)).assign(slots, positions)
    assert ex.value.missing == 2
    assert {"SLOT_POOL_SIZE_MISMATCH", "POSITION_COUNT_MISMATCH"} <= {i.code for i in ex.value.issues}


def test_unbalanced_pool_is_rejected():
    positions = positions_for("futsal", "formation1")
    slots = filled_slots(positions)
    slots[0] = Slot(position="Ala", name="Extra Ala")
    with pytest.raises(RosterValidationError) as ex:
        TeamAssigner(seeded_random(1)).assign(slots, positions)
    assert ex.value.missing == 0
    assert "POSITION_COUNT_MISMATCH" in {i.code for i in ex.value.issues}


def test_unknown_position_is_rejected():
    positions = positions_for("futsal", "formation1")
    slots = filled_slots(positions)
    slots[0] = Slot(position="Líbero", name="Franz")
    with pytest.raises(RosterValidationError) as ex:
        TeamAssigner(seeded_random(1)).assign(slots, positions)
    assert "UNKNOWN_POSITION" in {i.code for i in ex.value.issues}


def test_quota_exhaustion_hard_stops():
    positions = [Position("Goleiro", 1)]
    slots = [Slot("Goleiro", "A"), Slot("Goleiro", "B"), Slot("Goleiro", "C")]
    assigner = TeamAssigner(seeded_random(1), validator=_PermissiveValidator())
    with pytest.raises(DrawIntegrityError) as ex:
        assigner.assign(slots, positions)
    assert ex.value.error_code == "POSITION_QUOTA_EXHAUSTED"
    assert ex.value.artifact.state_snapshot["quotas"] == {"Goleiro": 1}
