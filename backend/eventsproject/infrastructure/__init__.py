"""Infrastructure Layer — database sessions, repository adapters, logging setup.

Invariants:
    - Infrastructure implements core protocols; core never imports from here
    - All SQLAlchemy failures mapped to core.errors.DatabaseError

Design Decisions:
    - In-memory and SQL adapters side by side: same Protocols, swapped at wiring time
"""
