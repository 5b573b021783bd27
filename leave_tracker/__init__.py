"""Leave tracker: employee leave balances with an approve/reject workflow."""

from . import app, config, employee_service, errors, leave_service, models, store
from .app import create_service
from .errors import AlreadyProcessed, InsufficientBalance, InvalidRange, LeaveError, NotFound
from .leave_service import LeaveService, calculate_leave_days
from .models import Employee, LeaveApplication
from .store import LeaveStore

__all__ = [
    'app',
    'config',
    'employee_service',
    'errors',
    'leave_service',
    'models',
    'store',
    'AlreadyProcessed',
    'Employee',
    'InsufficientBalance',
    'InvalidRange',
    'LeaveApplication',
    'LeaveError',
    'LeaveService',
    'LeaveStore',
    'NotFound',
    'calculate_leave_days',
    'create_service',
]
