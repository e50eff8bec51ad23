"""Presenters that turn repository results into view updates."""

from .add_edit_task import AddEditTaskPresenter
from .statistics import StatisticsPresenter
from .task_detail import TaskDetailPresenter
from .tasks import TasksFilterType, TasksPresenter

__all__ = [
    "AddEditTaskPresenter",
    "StatisticsPresenter",
    "TaskDetailPresenter",
    "TasksFilterType",
    "TasksPresenter",
]
