import pytest
from apps.cli import bench, play


def test_bench_sample(capsys):
    assert bench.main(["--solvers", "first_consistent", "--sample", "5", "--progress", "off"]) == 0
    out = capsys.readouterr().out
    assert "[first_consistent] games=5" in out

def test_bench_unknown_solver():
    with pytest.raises(SystemExit):
        bench.main(["--solvers", "nope", "--sample", "1", "--progress", "off"])

def test_play_has_no_solver_choice():
    with pytest.raises(SystemExit):
        play.main(["--solver", "random_consistent"])

def test_bench_sample_zero_plays_nothing(capsys):
    assert bench.main(["--solvers", "first_consistent", "--sample", "0", "--progress", "off"]) == 0
    assert "[first_consistent] games=0" in capsys.readouterr().out
