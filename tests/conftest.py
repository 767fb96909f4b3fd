import pytest

from todolist import LocalStorage, TaskStore


@pytest.fixture
def storage_dir(tmp_path):
    return tmp_path / "todo"


@pytest.fixture
def storage(storage_dir):
    return LocalStorage(str(storage_dir))


@pytest.fixture
def store(storage_dir):
    """A freshly opened store: three sample tasks, ids 1-3"""
    return TaskStore.open(storage_dir=str(storage_dir))


@pytest.fixture
def empty_store(storage):
    """Store with nothing loaded and no seeding"""
    return TaskStore(storage)
