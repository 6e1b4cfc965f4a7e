"""
Database connection singletons demo (Singleton pattern).

Fetches each connection twice and shows both fetches return the same object.
See `design_patterns.services.database` for the two lazy-initialisation
strategies.

Run with:
    python -m design_patterns.singleton
"""

from design_patterns.config import configure_logging
from design_patterns.services.database import DatabaseConnectionDCL, DatabaseConnectionHolder


def run_demo() -> None:
    dcl1 = DatabaseConnectionDCL.get_instance()
    dcl2 = DatabaseConnectionDCL.get_instance()
    print(f"DCL: Same instance? {dcl1 is dcl2}")
    dcl1.query("SELECT * FROM users")

    print()

    holder1 = DatabaseConnectionHolder.get_instance()
    holder2 = DatabaseConnectionHolder.get_instance()
    print(f"Holder: Same instance? {holder1 is holder2}")
    holder1.query("SELECT * FROM orders")


def main() -> None:
    configure_logging()
    run_demo()


if __name__ == "__main__":
    main()
