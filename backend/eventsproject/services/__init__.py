"""Services Layer — async orchestration of repositories around core rules.

Invariants:
    - Services depend on repository Protocols, never on SQLAlchemy
    - Lookup failures raised as core.errors types, never swallowed

Design Decisions:
    - One service class for the engine: the operations share the same three stores
"""
