"""Tests for the simulated RemoteDataSource."""

from unittest.mock import AsyncMock, patch

import pytest

from todoapp.models import Error, Success, Task
from todoapp.repositories import RemoteDataNotFoundError, RemoteDataSource
from todoapp.repositories.remote import SEED_TASKS


class TestRemoteDataSource:
    """Tests for RemoteDataSource."""

    @pytest.mark.asyncio
    async def test_seeded_remote_returns_sample_tasks(self):
        source = RemoteDataSource(latency=0)

        result = await source.get_tasks()

        assert result == Success(list(SEED_TASKS))

    @pytest.mark.asyncio
    async def test_empty_remote_is_error(self, remote_source: RemoteDataSource):
        result = await remote_source.get_tasks()

        assert isinstance(result, Error)
        assert isinstance(result.cause, RemoteDataNotFoundError)

    @pytest.mark.asyncio
    async def test_get_task_unknown_is_error(self, remote_source: RemoteDataSource):
        result = await remote_source.get_task("missing")

        assert isinstance(result, Error)
        assert isinstance(result.cause, RemoteDataNotFoundError)

    @pytest.mark.asyncio
    async def test_save_and_get_task(self, remote_source: RemoteDataSource):
        task = Task(title="Title")

        await remote_source.save_task(task)

        assert await remote_source.get_task(task.id) == Success(task)

    @pytest.mark.asyncio
    async def test_complete_by_id_uses_stored_row(self, remote_source: RemoteDataSource):
        task = Task(title="Title")
        await remote_source.save_task(task)

        await remote_source.complete_task(task.id)

        result = await remote_source.get_task(task.id)
        assert isinstance(result, Success)
        assert result.value.completed is True

    @pytest.mark.asyncio
    async def test_activate_task(self, remote_source: RemoteDataSource):
        task = Task(title="Title", completed=True)
        await remote_source.save_task(task)

        await remote_source.activate_task(task)

        result = await remote_source.get_task(task.id)
        assert isinstance(result, Success)
        assert result.value.is_active

    @pytest.mark.asyncio
    async def test_clear_completed_keeps_active(self, remote_source: RemoteDataSource):
        active = Task(title="Active")
        await remote_source.save_task(active)
        await remote_source.save_task(Task(title="Done", completed=True))

        await remote_source.clear_completed_tasks()

        assert await remote_source.get_tasks() == Success([active])

    @pytest.mark.asyncio
    async def test_delete_task_and_delete_all(self, remote_source: RemoteDataSource):
        first = Task(title="First")
        second = Task(title="Second")
        await remote_source.save_task(first)
        await remote_source.save_task(second)

        await remote_source.delete_task(first.id)
        assert await remote_source.get_tasks() == Success([second])

        await remote_source.delete_all_tasks()
        assert isinstance(await remote_source.get_tasks(), Error)

    @pytest.mark.asyncio
    async def test_operations_sleep_for_latency(self):
        """Every round trip suspends for the configured latency."""
        source = RemoteDataSource(latency=1.5, seed=False)

        with patch("todoapp.repositories.remote.asyncio.sleep", new=AsyncMock()) as sleep:
            await source.save_task(Task(title="Title"))
            await source.get_tasks()

        assert sleep.await_count == 2
        sleep.assert_awaited_with(1.5)
