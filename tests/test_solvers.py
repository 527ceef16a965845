import pytest
from mastermind.solvers import create_solver, get_solver_ids


def test_registry_ids():
    assert get_solver_ids() == ["first_consistent", "random_consistent"]

def test_unknown_solver():
    with pytest.raises(ValueError):
        create_solver("entropy")

def test_first_consistent_plays_head():
    solver = create_solver("first_consistent")
    assert solver.next_guess({"turn": 1, "candidates": ["eeff", "abcd"], "N": 4}) == "eeff"

def test_random_consistent_is_seeded():
    state = {"turn": 1, "candidates": ["aaaa", "bbbb", "cccc", "dddd", "eeee"], "N": 4}
    a, b = create_solver("random_consistent"), create_solver("random_consistent")
    a.reset(seed=5)
    b.reset(seed=5)
    picks_a = [a.next_guess(state) for _ in range(10)]
    picks_b = [b.next_guess(state) for _ in range(10)]
    assert picks_a == picks_b
    assert set(picks_a) <= set(state["candidates"])

@pytest.mark.parametrize("solver_id", ["first_consistent", "random_consistent"])
def test_empty_candidates_raise(solver_id):
    with pytest.raises(ValueError):
        create_solver(solver_id).next_guess({"turn": 1, "candidates": [], "N": 4})
