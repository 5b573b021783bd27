"""Startup wiring for a front end.

A UI creates one service at startup and keeps it for the life of the
process::

    service = create_service()
    service.apply_leave(101, "2024-02-01", "2024-02-05", "Family trip")
"""

import logging

from . import config
from .leave_service import LeaveService
from .store import LeaveStore


def create_service(env_file=".env", seed=None):
    """Load settings, set up logging and return a service over a loaded store."""
    config.load_env(env_file)
    config.configure_logging()

    store = LeaveStore().initialize(seed=seed)
    logging.info(
        "Leave data: employees in %s, applications in %s",
        store.employees_path,
        store.applications_path,
    )
    return LeaveService(store)
