"""Overlay Store — SQL persistence for per-state fun-fact overlays.

Invariants:
    - At most one StateFunfacts row per state code
    - get() returning None is a valid state, not an error
    - Every successful mutation is a single commit of the whole list
    - Failed validation leaves the stored list untouched (nothing is flushed)

Design Decisions:
    - List rules delegated to core/enforce_funfacts.py; this class only loads and saves
    - Concurrent writers to the same state are last-write-wins; no row locking
    - remove_at on a missing row behaves like an empty list, so the caller sees
      "No Fun Facts found" rather than a different error
"""

import logging
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from statefacts.core.catalog import StateRecord
from statefacts.core.domain_types import StateCode
from statefacts.core.enforce_funfacts import (
    append_funfacts, remove_funfact, replace_funfact,
)
from statefacts.models.state_funfacts import StateFunfacts

logger = logging.getLogger(__name__)


class SqlOverlayStore:
    """OverlayRepository backed by the state_funfacts table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, code: StateCode) -> StateFunfacts | None:
        return await self.db.get(StateFunfacts, code)

    async def get_all(self) -> dict[str, list[str]]:
        """All stored overlays keyed by state code."""
        result = await self.db.execute(select(StateFunfacts))
        return {
            row.state_code: list(row.funfacts or [])
            for row in result.scalars().all()
        }

    async def upsert_append(
        self, code: StateCode, facts: Sequence[str],
    ) -> StateFunfacts:
        """Create the overlay if missing, then append facts in order."""
        row = await self.get(code)
        if row is None:
            row = StateFunfacts(state_code=code, funfacts=[])
            self.db.add(row)
        row.funfacts = append_funfacts(row.funfacts, facts)
        await self.db.commit()
        logger.info(
            f"Appended {len(facts)} fun fact(s) to {code}",
            extra={"state_code": code, "funfact_count": len(row.funfacts)},
        )
        return row

    async def replace_at(
        self, record: StateRecord, index: int, fact: str,
    ) -> StateFunfacts:
        """Overwrite the fact at a 1-based index."""
        row = await self.get(record.code)
        updated = replace_funfact(record, row.funfacts if row else None, index, fact)
        row.funfacts = updated
        await self.db.commit()
        logger.info(
            f"Replaced fun fact #{index} for {record.code}",
            extra={"state_code": record.code, "funfact_count": len(updated)},
        )
        return row

    async def remove_at(
        self, record: StateRecord, index: int,
    ) -> StateFunfacts:
        """Remove the fact at a 1-based index. The row stays, possibly empty."""
        row = await self.get(record.code)
        if row is None:
            row = StateFunfacts(state_code=record.code, funfacts=[])
        updated = remove_funfact(record, row.funfacts, index)
        row.funfacts = updated
        await self.db.commit()
        logger.info(
            f"Removed fun fact #{index} for {record.code}",
            extra={"state_code": record.code, "funfact_count": len(updated)},
        )
        return row
