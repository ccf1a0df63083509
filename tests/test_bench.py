import random

import pytest

from aisdlab.bench import main, run, time_operation


def test_time_operation_is_non_negative():
    assert time_operation(random.Random(1)) >= 0


def test_time_operation_rejects_impossible_set():
    with pytest.raises(ValueError):
        time_operation(random.Random(1), set_size=20, min_val=1, max_val=5)


def test_run_numbers_follow_range():
    results = list(run(10, 13, random.Random(2)))
    assert [number for number, _ in results] == [10, 11, 12]
    assert all(elapsed >= 0 for _, elapsed in results)


def test_run_empty_range():
    assert list(run(5, 5, random.Random(3))) == []


def test_main_prints_lines(capsys):
    assert main(["--start", "10", "--stop", "14", "--seed", "4"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split(";")[0] for line in lines] == ["10", "11", "12", "13"]
    assert all(int(line.split(";")[1]) >= 0 for line in lines)