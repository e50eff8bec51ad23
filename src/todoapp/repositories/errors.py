"""Data source error taxonomy.

These exceptions are not raised across the data source boundary for reads;
they travel as the ``cause`` of an ``Error`` result.
"""


class DataSourceError(Exception):
    """Base exception for data source failures."""

    pass


class LocalDataNotFoundError(DataSourceError):
    """The local store has no matching rows."""

    pass


class RemoteDataNotFoundError(DataSourceError):
    """The remote store has no matching data or could not be reached."""

    pass
