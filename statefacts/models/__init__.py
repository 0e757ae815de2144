"""ORM Models — SQLAlchemy declarative models for persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Only the fun-fact overlay is persisted; catalog data lives in states.json

Design Decisions:
    - Models imported here so Base.metadata is populated before create_all/autogenerate
"""

from statefacts.models.state_funfacts import StateFunfacts  # noqa: F401
