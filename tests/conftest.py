from pathlib import Path

import pytest

from minigit.engine import Repository


class FakeClock:
    """Clock returning a predictable, increasing timestamp per call."""

    def __init__(self):
        self.calls = 0

    def current_timestamp(self) -> str:
        self.calls += 1
        return f"2024-01-01 00:00:{self.calls:02d}"


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def work_dir(tmp_path) -> Path:
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def repository(clock):
    return Repository(clock=clock)


@pytest.fixture
def initialized_repo(repository, work_dir):
    repository.init(str(work_dir))
    return repository
