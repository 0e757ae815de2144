"""Services Layer — overlay persistence and the states request-handling core.

Invariants:
    - Services receive their collaborators (db session, catalog, random source) by injection
    - Pure rules stay in core/; services only orchestrate IO around them
"""
