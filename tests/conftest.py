"""Shared fixtures."""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from todoapp.repositories import (
    LocalDataSource,
    RemoteDataSource,
    TasksDataSource,
    TasksRepository,
)


@pytest.fixture
def task_dir(tmp_path: Path) -> Path:
    """Create a temporary task directory."""
    task_root = tmp_path / ".tasks"
    task_root.mkdir()
    return task_root


@pytest.fixture
def remote_mock() -> AsyncMock:
    """Remote data source double."""
    return AsyncMock(spec=TasksDataSource)


@pytest.fixture
def local_mock() -> AsyncMock:
    """Local data source double."""
    return AsyncMock(spec=TasksDataSource)


@pytest.fixture
def mocked_repository(remote_mock: AsyncMock, local_mock: AsyncMock) -> TasksRepository:
    """A fresh repository over mocked data sources."""
    return TasksRepository(remote_mock, local_mock)


@pytest.fixture
def local_source(task_dir: Path) -> LocalDataSource:
    return LocalDataSource(task_dir)


@pytest.fixture
def remote_source() -> RemoteDataSource:
    """An empty remote with no latency."""
    return RemoteDataSource(latency=0, seed=False)


@pytest.fixture
def repository(remote_source: RemoteDataSource, local_source: LocalDataSource) -> TasksRepository:
    """A fresh repository over the real data sources."""
    return TasksRepository(remote_source, local_source)
