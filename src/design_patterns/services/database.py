"""
Database connection singletons (Singleton pattern).

Purpose: ensure only one instance of a class exists per process and give
every caller the same global access point to it. Typical uses are connection
pools, configuration managers and caches.

Both classes below satisfy the same contract: `get_instance()` creates the
instance on first access, concurrent first accesses from many threads still
construct it exactly once, and every later access returns that same object.
Calling the class directly raises TypeError; the constructor only accepts a
module-private creation token.

=== DatabaseConnectionDCL: double-checked locking ===

  1. Read the class slot without locking. Once initialised this is the only
     work an access does.
  2. If the slot is empty, take the class lock and check again. Several
     threads can pass step 1 together; only the first one through the lock
     sees an empty slot and constructs.
  3. Publish the instance to the slot while still holding the lock.

=== DatabaseConnectionHolder: one-time module initialisation ===

The instance is created by the body of the `design_patterns._connection_holder`
module, imported on the first `get_instance()` call. Python's import system
runs a module body at most once per process and makes concurrent importers
wait on a per-module lock until it finishes, so the access path needs no lock
of its own and no thread can see a half-built instance.

This module is never run as a script, so the classes exist exactly once per
process; the runnable demo lives in `design_patterns.singleton`.
"""

import importlib
import logging
import threading
import time

from design_patterns.config import CONNECTION_LATENCY_SECONDS

logger = logging.getLogger(__name__)

_CREATE_KEY = object()

HOLDER_MODULE = "design_patterns._connection_holder"


class _DatabaseConnection:
    """Shared behaviour of the singleton connections."""

    LABEL = "Connection"
    instances_created = 0

    def __init__(self, create_key: object = None) -> None:
        if create_key is not _CREATE_KEY:
            raise TypeError(f"{type(self).__name__} is a singleton; use {type(self).__name__}.get_instance()")
        logger.info("%s: Opening connection", self.LABEL)
        time.sleep(CONNECTION_LATENCY_SECONDS)  # Simulate connection handshake
        type(self).instances_created += 1

    def query(self, sql: str) -> str:
        line = f"{self.LABEL}: Executing query: {sql}"
        print(line)
        return line


class DatabaseConnectionDCL(_DatabaseConnection):
    LABEL = "DCL"
    instances_created = 0

    _instance: "DatabaseConnectionDCL | None" = None
    _lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> "DatabaseConnectionDCL":
        instance = cls._instance
        if instance is None:  # First check (no locking)
            with cls._lock:
                instance = cls._instance
                if instance is None:  # Second check (with locking)
                    instance = cls(_CREATE_KEY)
                    cls._instance = instance
        return instance


class DatabaseConnectionHolder(_DatabaseConnection):
    LABEL = "Holder"
    instances_created = 0

    @classmethod
    def get_instance(cls) -> "DatabaseConnectionHolder":
        # Looked up through sys.modules on every call; only the first call
        # executes the holder module.
        return importlib.import_module(HOLDER_MODULE).INSTANCE

    @classmethod
    def _create(cls) -> "DatabaseConnectionHolder":
        return cls(_CREATE_KEY)
