"""Taskpane module: the add-in's save, generate and reply actions.

Public API:
    - TaskpaneController: Runs actions and reduces failures to a status
    - ActionResult: Outcome of one action
    - describe_error: Maps pipeline exceptions to status strings
"""

from .controller import TaskpaneController, describe_error
from .exceptions import NoResponseError, TaskpaneError
from .models import ActionResult

__all__ = [
    "TaskpaneController",
    "ActionResult",
    "describe_error",
    "TaskpaneError",
    "NoResponseError",
]
