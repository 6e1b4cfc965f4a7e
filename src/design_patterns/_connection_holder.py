"""Holds the DatabaseConnectionHolder instance; imported lazily by get_instance()."""

from design_patterns.services.database import DatabaseConnectionHolder

INSTANCE = DatabaseConnectionHolder._create()
