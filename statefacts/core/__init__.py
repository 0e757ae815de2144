"""Core — pure catalog, merge and validation logic.

Invariants:
    - No IO outside catalog loading; no FastAPI or SQLAlchemy imports
    - Errors raised here carry their HTTP status; the shell only renders them
"""
