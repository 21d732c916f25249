import pytest

from aoc2024.inputs import PUZZLE_INPUTS_DIR

SAMPLE_LINES = ["3 4", "4 3", "2 5", "1 3", "3 9", "3 3"]


@pytest.fixture
def sample_lines():
    return list(SAMPLE_LINES)


@pytest.fixture
def sample_path():
    return PUZZLE_INPUTS_DIR / "day01-sample.txt"


@pytest.fixture
def inputs_dir(tmp_path, monkeypatch):
    # point fixture lookup at an empty scratch directory
    monkeypatch.setenv("AOC_PUZZLE_INPUTS", str(tmp_path))
    return tmp_path
