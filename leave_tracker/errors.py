"""Errors raised by the leave services.

All of them are validation failures a caller can recover from. They derive
from ``ValueError`` so code that already guards service calls with
``except ValueError`` keeps working.
"""


class LeaveError(ValueError):
    """Base class for leave workflow errors."""


class NotFound(LeaveError):
    """Referenced employee or leave application does not exist."""


class InvalidRange(LeaveError):
    """Dates are malformed or the end date precedes the start date."""


class InsufficientBalance(LeaveError):
    """Requested or approved days exceed the employee's current balance."""


class AlreadyProcessed(LeaveError):
    """Approve or reject was attempted on an application that is not pending."""
