"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Overlay persistence accessed only through OverlayRepository
    - An absent overlay is a valid state (None), never an error

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Async in Protocol: implementations do IO, the pure merge/enforce
      functions that consume the results are never async themselves
"""

from typing import Protocol, Sequence

from statefacts.core.catalog import StateRecord
from statefacts.core.domain_types import StateCode


class OverlayLike(Protocol):
    """Structural contract for a stored overlay document."""
    state_code: str
    funfacts: list


class OverlayRepository(Protocol):
    """Contract for fun-fact overlay persistence — implemented by shell."""
    async def get(self, code: StateCode) -> OverlayLike | None: ...
    async def get_all(self) -> dict[str, list[str]]: ...
    async def upsert_append(
        self, code: StateCode, facts: Sequence[str],
    ) -> OverlayLike: ...
    async def replace_at(
        self, record: StateRecord, index: int, fact: str,
    ) -> OverlayLike: ...
    async def remove_at(
        self, record: StateRecord, index: int,
    ) -> OverlayLike: ...
