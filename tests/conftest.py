"""Shared fixtures for partitioner tests."""

from pathlib import Path

import pytest

# 100 bytes of irregular lines. With 4 workers the nominal boundaries are
# 25, 54 and 91, which move to 29, 66 and 94 (just past the next newline).
SCENARIO_CONTENT = (
    b"alpha,1\n"
    b"bravo,22\n"
    b"charlie,333\n"
    b"delta,4444\n"
    b"echo,55555\n"
    b"foxtrot,666666\n"
    b"golf,7\n"
    b"hotel,88\n"
    b"india,99999\n"
    b"julie\n"
)

SCENARIO_PARTITIONS = [(0, 29), (29, 37), (66, 28), (94, 6)]


@pytest.fixture
def scenario_path(tmp_path: Path) -> Path:
    path = tmp_path / "scenario.txt"
    path.write_bytes(SCENARIO_CONTENT)
    return path
