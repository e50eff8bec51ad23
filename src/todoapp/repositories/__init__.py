"""Repository layer for data access."""

from .errors import DataSourceError, LocalDataNotFoundError, RemoteDataNotFoundError
from .filesystem import LocalDataSource
from .protocol import TasksDataSource
from .remote import RemoteDataSource
from .tasks_repository import TasksRepository

__all__ = [
    "DataSourceError",
    "LocalDataNotFoundError",
    "LocalDataSource",
    "RemoteDataNotFoundError",
    "RemoteDataSource",
    "TasksDataSource",
    "TasksRepository",
]
