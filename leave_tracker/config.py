"""Environment-driven settings and logging setup."""

import logging
import os
import sys
from pathlib import Path

DEFAULT_EMPLOYEES_FILE = "employees.json"
DEFAULT_APPLICATIONS_FILE = "applications.json"
DEFAULT_LOG_FILE = "leave_tracker.log"

# Roster written on first start when no employee data exists yet.
DEMO_EMPLOYEES = (
    (101, "Rahul Sharma", 20),
    (102, "Priya Singh", 18),
    (103, "Amit Verma", 15),
)


def load_env(path=".env"):
    """Copy ``KEY=VALUE`` lines from an env file into ``os.environ``.

    Relative paths are resolved against the working directory. Variables
    already present in the environment win over the file. Returns whether a
    file was read.
    """
    env_path = Path(path)
    if not env_path.is_file():
        logging.warning("Environment file %s not found; using process environment", env_path)
        return False

    with env_path.open(encoding="utf-8") as env_file:
        for raw_line in env_file:
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, _, value = line.partition("=")
            os.environ.setdefault(key.strip(), value.strip().strip("'\""))
    return True


def data_dir() -> Path:
    return Path(os.getenv("LEAVE_DATA_DIR", "."))


def employees_path() -> Path:
    return data_dir() / os.getenv("EMPLOYEES_FILE", DEFAULT_EMPLOYEES_FILE)


def applications_path() -> Path:
    return data_dir() / os.getenv("APPLICATIONS_FILE", DEFAULT_APPLICATIONS_FILE)


def seed_demo_employees() -> bool:
    """Return whether an empty store should be seeded with the demo roster."""
    raw = os.getenv("SEED_DEMO_EMPLOYEES", "1").strip().lower()
    return raw not in {"0", "false", "no", "off", ""}


def configure_logging() -> bool:
    """Log to ``LOG_FILE`` and the console.

    Does nothing and returns ``False`` when the root logger already has
    handlers. If the log file cannot be opened (e.g. due to permissions
    issues), fall back to logging to stderr only.
    """
    root = logging.getLogger()
    if root.handlers:
        return False

    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    log_format = "%(asctime)s - %(levelname)s - %(message)s"
    log_file = os.getenv("LOG_FILE", DEFAULT_LOG_FILE)
    try:
        file_handler = logging.FileHandler(log_file)
    except OSError as e:
        logging.basicConfig(stream=sys.stderr, level=level, format=log_format)
        logging.warning(
            "Falling back to stderr logging because %s could not be opened: %s",
            log_file,
            e,
        )
        return True

    logging.basicConfig(
        level=level,
        format=log_format,
        handlers=[file_handler, logging.StreamHandler()],
    )
    return True
