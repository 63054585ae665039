"""Errors raised by the intake services and translated by the routers."""


class TaskPilotError(Exception):
    """Base class for service-level errors."""


class ValidationError(TaskPilotError):
    """Input the user can fix (empty title, no owner). Nothing was written."""


class WriteFailure(TaskPilotError):
    """The task store rejected an insert."""
