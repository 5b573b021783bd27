import os
import sys

import pytest


PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from leave_tracker.store import LeaveStore  # noqa: E402


@pytest.fixture
def store(tmp_path):
    """A store seeded with the demo roster, persisted under ``tmp_path``."""
    return LeaveStore(
        employees_path=tmp_path / 'employees.json',
        applications_path=tmp_path / 'applications.json',
    ).initialize(seed=True)


@pytest.fixture
def reload_store(tmp_path):
    def _reload():
        return LeaveStore(
            employees_path=tmp_path / 'employees.json',
            applications_path=tmp_path / 'applications.json',
        ).initialize(seed=False)

    return _reload
