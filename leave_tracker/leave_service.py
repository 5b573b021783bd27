"""Service: Leave Service. Handle leave applications and approvals."""
from __future__ import annotations

import logging
import re
from dataclasses import replace
from datetime import datetime

from . import employee_service
from .errors import AlreadyProcessed, InsufficientBalance, InvalidRange, LeaveError, NotFound
from .models import STATUS_APPROVED, STATUS_REJECTED, Employee, LeaveApplication

DATE_FORMAT = "%Y-%m-%d"
# strptime alone accepts single-digit months and days; require the full form
_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

UNKNOWN_EMPLOYEE_NAME = "Unknown"


def calculate_leave_days(start_date: str, end_date: str) -> int:
    """Return the inclusive number of days between two ISO dates.

    A single-day leave (``start_date == end_date``) counts as 1. Malformed or
    impossible dates return ``-1``; an end date before the start date yields
    a value of 0 or less. Callers treat anything below 1 as an invalid range.
    """
    try:
        start = _parse_date(start_date)
        end = _parse_date(end_date)
    except ValueError:
        return -1
    return (end - start).days + 1


def _parse_date(value):
    if not isinstance(value, str) or not _ISO_DATE_RE.match(value):
        raise ValueError(f"Invalid date: {value!r}")
    return datetime.strptime(value, DATE_FORMAT).date()


class LeaveService:
    """Business rules for applying for, approving and rejecting leave.

    Every mutating call holds ``store.lock`` across validation, mutation and
    persistence, so no two mutations interleave. Queries return copies of the
    stored records.
    """

    def __init__(self, store):
        self.store = store

    def apply_leave(self, emp_id: int, start_date: str, end_date: str, reason: str) -> LeaveApplication:
        """Create a pending leave application.

        Raises
        ------
        NotFound
            ``emp_id`` does not match an employee.
        InvalidRange
            A date is malformed or ``end_date`` is before ``start_date``.
        InsufficientBalance
            The employee's current balance is lower than the requested days.
            Other pending applications are not taken into account.
        LeaveError
            ``reason`` is not text.
        """
        # Only values that survive a reload may be stored
        if isinstance(emp_id, bool) or not isinstance(emp_id, int):
            raise NotFound(f"Employee {emp_id!r} not found")
        if not isinstance(reason, str):
            raise LeaveError("Leave reason must be text")

        with self.store.lock:
            employee = self._employee_or_raise(emp_id)

            days = calculate_leave_days(start_date, end_date)
            if days <= 0:
                raise InvalidRange(f"Invalid date range: {start_date} to {end_date}")

            if employee.leave_balance < days:
                raise InsufficientBalance(
                    f"Not enough leave balance: requested {days} days, "
                    f"but only {employee.leave_balance} days remain"
                )

            application = LeaveApplication(
                leave_id=self.store.allocate_leave_id(),
                emp_id=emp_id,
                start_date=start_date,
                end_date=end_date,
                reason=reason,
                days_requested=days,
            )
            self.store.applications[application.leave_id] = application
            self._persist("apply", application.leave_id)

            logging.info(
                "Leave %s applied by employee %s: %s to %s (%d days)",
                application.leave_id,
                emp_id,
                start_date,
                end_date,
                days,
            )
            return replace(application)

    def approve(self, leave_id: int) -> None:
        """Approve a pending application and deduct its days from the balance.

        The balance is checked again here because other approvals may have
        reduced it since the application was made.
        """
        with self.store.lock:
            application = self._pending_application_or_raise(leave_id)
            employee = self._employee_or_raise(application.emp_id)

            if employee.leave_balance < application.days_requested:
                raise InsufficientBalance(
                    f"Employee {employee.emp_id} has insufficient balance at approval time: "
                    f"requested {application.days_requested} days, "
                    f"but only {employee.leave_balance} days remain"
                )

            employee.leave_balance -= application.days_requested
            application.status = STATUS_APPROVED
            self._persist("approve", leave_id)

            logging.info(
                "Leave %s approved; employee %s balance is now %d",
                leave_id,
                employee.emp_id,
                employee.leave_balance,
            )

    def reject(self, leave_id: int) -> None:
        """Reject a pending application. The balance is left unchanged."""
        with self.store.lock:
            application = self._pending_application_or_raise(leave_id)
            application.status = STATUS_REJECTED
            self._persist("reject", leave_id)
            logging.info("Leave %s rejected", leave_id)

    def list_applications(self) -> list[LeaveApplication]:
        with self.store.lock:
            return [replace(application) for application in self.store.applications.values()]

    def list_applications_for_employee(self, emp_id: int) -> list[LeaveApplication]:
        with self.store.lock:
            return [
                replace(application)
                for application in self.store.applications.values()
                if application.emp_id == emp_id
            ]

    def get_employee(self, emp_id: int) -> Employee | None:
        return employee_service.get_employee(self.store, emp_id)

    def list_employees(self) -> list[Employee]:
        return employee_service.get_employees(self.store)

    def application_overview(self) -> list[dict]:
        """Return every application joined with its employee's name."""
        with self.store.lock:
            rows = []
            for application in self.store.applications.values():
                employee = self.store.employees.get(application.emp_id)
                row = application.to_dict()
                row['emp_name'] = employee.name if employee else UNKNOWN_EMPLOYEE_NAME
                rows.append(row)
            return rows

    def employee_history(self, emp_id: int) -> dict:
        """Return an employee's current record and their leave history."""
        with self.store.lock:
            employee = self._employee_or_raise(emp_id)
            return {
                'employee': employee.to_dict(),
                'applications': [
                    application.to_dict()
                    for application in self.store.applications.values()
                    if application.emp_id == emp_id
                ],
            }

    def _employee_or_raise(self, emp_id):
        employee = self.store.employees.get(emp_id)
        if employee is None:
            raise NotFound(f"Employee {emp_id} not found")
        return employee

    def _pending_application_or_raise(self, leave_id):
        application = self.store.applications.get(leave_id)
        if application is None:
            raise NotFound(f"Leave {leave_id} not found")
        if not application.is_pending:
            raise AlreadyProcessed(f"Leave {leave_id} already processed ({application.status})")
        return application

    def _persist(self, action, leave_id):
        if not self.store.save():
            logging.warning(
                "Leave %s %s recorded in memory but could not be persisted", leave_id, action
            )
