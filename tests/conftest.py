"""Pytest fixtures for pathtree tests."""
import pytest

from pathtree.core.groups import (
    GroupTree,
    JsonGroupStore,
    MemoryGroupFactory,
    MemoryGroupStore,
    ProjectGroupFactory,
)


@pytest.fixture
def tree():
    """Empty tree rooted at /."""
    return GroupTree.create("/")


@pytest.fixture
def project_tree():
    """Empty tree rooted at /Project."""
    return GroupTree.create("/Project", MemoryGroupFactory())


@pytest.fixture
def memory_store():
    return MemoryGroupStore()


@pytest.fixture
def json_store(tmp_path):
    """JSON store in a temporary directory."""
    return JsonGroupStore(tmp_path / "groups.json")


@pytest.fixture
def folder_factory(tmp_path, memory_store):
    """Factory creating folders under tmp_path/work."""
    return ProjectGroupFactory(base_dir=tmp_path / "work", store=memory_store)
