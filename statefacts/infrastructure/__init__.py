"""Infrastructure Layer — database access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports domain logic (only the error taxonomy)
    - Driver exceptions are mapped to DatabaseError before leaving this layer

Design Decisions:
    - Session manager and logging setup are initialized once by the app lifespan
"""
