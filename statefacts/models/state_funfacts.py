"""StateFunfacts ORM — persists the per-state fun-fact overlay document.

Invariants:
    - state_code is the primary key: at most one overlay per state
    - funfacts is an ordered JSON list of strings (possibly empty)
    - Rows are never deleted by the service; removing the last fact leaves []

Design Decisions:
    - JSON column over a child table: the list is read and written whole, like a document
    - Callers assign a NEW list on every change (JSON columns do not track in-place mutation)
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from statefacts.db.base import Base


class StateFunfacts(Base):
    """Overlay document — replaces catalog fun facts while non-empty."""
    __tablename__ = "state_funfacts"

    state_code: Mapped[str] = mapped_column(String(2), primary_key=True)
    funfacts: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
