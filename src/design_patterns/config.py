"""
Shared constants and logging setup for the demo entry points.

Every demo is runnable on its own (``python -m design_patterns.builder``) and
through the ``design-patterns`` CLI. Both paths call `configure_logging()`
so log records look the same regardless of how a demo was started.

Logs go to stderr. Demo output is printed to stdout, so piping a demo into
another program never mixes the two.
"""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = "WARNING"

# Order in which `design-patterns all` runs the demos.
DEMO_NAMES: tuple[str, ...] = ("builder", "observer", "singleton", "strategy", "factory")

# Simulated time to open a database connection in the singleton demo.
# Long enough that racing threads overlap inside the constructor.
CONNECTION_LATENCY_SECONDS = 0.05


def configure_logging(level: str | int = DEFAULT_LOG_LEVEL) -> None:
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
