"""Record types for employees and leave applications."""
from __future__ import annotations

from dataclasses import asdict, dataclass

STATUS_PENDING = 'Pending'
STATUS_APPROVED = 'Approved'
STATUS_REJECTED = 'Rejected'
VALID_STATUSES = {STATUS_PENDING, STATUS_APPROVED, STATUS_REJECTED}


@dataclass
class Employee:
    emp_id: int
    name: str
    leave_balance: int

    def label(self) -> str:
        """Return the roster label, e.g. ``101 - Rahul Sharma (Balance: 20)``."""
        return f"{self.emp_id} - {self.name} (Balance: {self.leave_balance})"

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> Employee:
        emp_id = _require_int(data, 'emp_id')
        balance = _require_int(data, 'leave_balance')
        if balance < 0:
            raise ValueError(f"Negative leave balance for employee {emp_id}")
        name = data['name']
        if not isinstance(name, str):
            raise ValueError(f"Invalid name for employee {emp_id}")
        return cls(emp_id=emp_id, name=name, leave_balance=balance)


@dataclass
class LeaveApplication:
    leave_id: int
    emp_id: int
    start_date: str
    end_date: str
    reason: str
    days_requested: int
    status: str = STATUS_PENDING

    @property
    def is_pending(self) -> bool:
        return self.status == STATUS_PENDING

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> LeaveApplication:
        status = data.get('status', STATUS_PENDING)
        if status not in VALID_STATUSES:
            raise ValueError(f"Unknown leave status: {status!r}")
        for key in ('start_date', 'end_date', 'reason'):
            if not isinstance(data[key], str):
                raise ValueError(f"Invalid {key} in leave record")
        return cls(
            leave_id=_require_int(data, 'leave_id'),
            emp_id=_require_int(data, 'emp_id'),
            start_date=data['start_date'],
            end_date=data['end_date'],
            reason=data['reason'],
            days_requested=_require_int(data, 'days_requested'),
            status=status,
        )


def _require_int(data, key):
    value = data[key]
    # bool is an int subclass; a stored true/false is not a valid count or id
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Field {key} must be an integer, got {value!r}")
    return value
