"""
Store: employee roster and leave applications kept in memory and persisted
to two JSON files.

Loading is best effort. A collection whose file is missing, unreadable or
malformed starts out empty rather than stopping the application. Saving is
also best effort: write failures are logged and the process keeps running on
its in-memory state.
"""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path

from . import config
from .models import Employee, LeaveApplication


class LeaveStore:
    """Owns the employee and application maps and their persistence."""

    def __init__(self, employees_path=None, applications_path=None):
        self.employees_path = Path(employees_path or config.employees_path())
        self.applications_path = Path(applications_path or config.applications_path())
        self.employees = {}
        self.applications = {}
        self.next_leave_id = 1
        # Use RLock so a service holding the lock can call save() safely
        self.lock = threading.RLock()

    def initialize(self, seed=None):
        """Load persisted state, seeding the demo roster into an empty store."""
        if seed is None:
            seed = config.seed_demo_employees()
        with self.lock:
            self.load()
            if not self.employees and seed:
                for emp_id, name, balance in config.DEMO_EMPLOYEES:
                    self.employees[emp_id] = Employee(emp_id, name, balance)
                logging.info("Seeded %d demo employees", len(config.DEMO_EMPLOYEES))
                self.save()
        return self

    def load(self):
        with self.lock:
            self.employees = self._load_collection(self.employees_path, Employee, 'emp_id')
            self.applications = self._load_collection(
                self.applications_path, LeaveApplication, 'leave_id'
            )
            self.next_leave_id = max(self.applications, default=0) + 1
            logging.info(
                "Loaded %d employees and %d leave applications",
                len(self.employees),
                len(self.applications),
            )

    def save(self):
        """Write both collections in full. Returns ``False`` if any write failed."""
        with self.lock:
            ok = self._write_collection(self.employees_path, self.employees)
            return self._write_collection(self.applications_path, self.applications) and ok

    def allocate_leave_id(self):
        with self.lock:
            leave_id = self.next_leave_id
            self.next_leave_id += 1
            return leave_id

    @staticmethod
    def _load_collection(path, record_type, id_field):
        """Read one collection, falling back to an empty dict on any bad input."""
        if not path.exists():
            logging.info("No data file at %s; starting with an empty collection", path)
            return {}

        try:
            with path.open(encoding='utf-8') as fh:
                raw = json.load(fh)
            if not isinstance(raw, dict):
                raise ValueError(f"expected a JSON object, got {type(raw).__name__}")
            records = {}
            for key, value in raw.items():
                record = record_type.from_dict(value)
                record_id = getattr(record, id_field)
                if str(record_id) != key:
                    raise ValueError(f"record {record_id} stored under key {key!r}")
                records[record_id] = record
            return records
        except Exception as e:  # noqa: BLE001 - any bad input means no prior state
            logging.warning("Ignoring unreadable data file %s: %s", path, e)
            return {}

    @staticmethod
    def _write_collection(path, records):
        payload = {str(record_id): record.to_dict() for record_id, record in records.items()}
        tmp_name = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{path.name}.", suffix='.tmp', dir=str(path.parent)
            )
            try:
                fh = os.fdopen(fd, 'w', encoding='utf-8')
            except Exception:
                os.close(fd)
                raise
            with fh:
                json.dump(payload, fh, indent=2)
                fh.flush()
                os.fsync(fh.fileno())
            # Rename over the target so readers never see a partial file
            os.replace(tmp_name, path)
            return True
        except OSError:
            logging.exception("Failed to save %s", path)
            if tmp_name and os.path.exists(tmp_name):
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logging.warning("Could not remove temporary file %s", tmp_name)
            return False
