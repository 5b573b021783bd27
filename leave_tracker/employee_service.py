"""
Service: Employee Service. Purpose: Manage the employee roster held by a
``LeaveStore``.
"""

import logging
from dataclasses import replace

from .models import Employee

# @tweakable employee validation configuration
ENABLE_EMPLOYEE_VALIDATION = True
MAX_NAME_LENGTH = 100


def add_employee(store, emp_id, name, leave_balance):
    """Add an employee to the roster, persist it and return a copy."""
    with store.lock:
        if ENABLE_EMPLOYEE_VALIDATION:
            _validate_employee_data(store, emp_id, name, leave_balance)

        employee = Employee(emp_id=emp_id, name=name.strip(), leave_balance=leave_balance)
        store.employees[emp_id] = employee
        if not store.save():
            logging.warning("Employee %s added but could not be persisted", emp_id)

        logging.info("Employee added: %s", employee.label())
        return replace(employee)


def get_employee(store, emp_id):
    """Return a copy of the employee with ``emp_id`` or ``None``."""
    with store.lock:
        employee = store.employees.get(emp_id)
        return replace(employee) if employee else None


def get_employees(store):
    """Return copies of all employees in roster order."""
    with store.lock:
        return [replace(employee) for employee in store.employees.values()]


def _validate_employee_data(store, emp_id, name, leave_balance):
    """Validate employee data before creation"""
    if isinstance(emp_id, bool) or not isinstance(emp_id, int) or emp_id <= 0:
        raise ValueError("Employee id must be a positive integer")
    if emp_id in store.employees:
        raise ValueError(f"Employee with id {emp_id} already exists")

    name = name.strip() if isinstance(name, str) else ''
    if not name or len(name) > MAX_NAME_LENGTH:
        raise ValueError(f"Invalid name (max {MAX_NAME_LENGTH} characters)")

    if isinstance(leave_balance, bool) or not isinstance(leave_balance, int) or leave_balance < 0:
        raise ValueError("Leave balance must be a non-negative integer")
