"""States Service — request handling core: validate, read/write the overlay, merge.

Invariants:
    - Decision order per call: code present -> code in catalog -> payload -> stored list -> index
    - Catalog and random source are injected; nothing here reads module globals
    - Reads never write; each mutation is exactly one overlay commit

Design Decisions:
    - Routes pass raw path values and raw body bytes; JSON is decoded here, after the
      code checks, so ordering is never decided by FastAPI request validation
    - Returns domain objects (EffectiveState, StateFunfacts); routes shape JSON
"""

from statefacts.core.catalog import StateCatalog
from statefacts.core.domain_types import Contiguity, StateField
from statefacts.core.enforce_funfacts import resolve_state
from statefacts.core.merge import (
    EffectiveState, RandomSource, field_value, merge_all, merge_state,
    select_random_fact,
)
from statefacts.core.repository_protocols import OverlayLike, OverlayRepository
from statefacts.schemas.funfacts import (
    FunfactDelete, FunfactsCreate, FunfactUpdate, decode_body,
)


class StatesService:
    """Catalog + overlay operations behind the /states endpoints."""

    def __init__(
        self,
        catalog: StateCatalog,
        store: OverlayRepository,
        rng: RandomSource,
    ):
        self.catalog = catalog
        self.store = store
        self.rng = rng

    # ─── Reads ──────────────────────────────────────────────────

    async def list_states(
        self, contiguity: Contiguity = Contiguity.ALL,
    ) -> list[EffectiveState]:
        overlays = await self.store.get_all()
        return merge_all(self.catalog, overlays, contiguity)

    async def get_state(self, raw_code: str | None) -> EffectiveState:
        record = resolve_state(self.catalog, raw_code)
        overlay = await self.store.get(record.code)
        return merge_state(record, overlay.funfacts if overlay else None)

    def get_field(self, raw_code: str | None, state_field: StateField) -> dict:
        """Catalog-only scalar lookup; no overlay access needed."""
        record = resolve_state(self.catalog, raw_code)
        return field_value(record, state_field)

    async def get_random_funfact(self, raw_code: str | None) -> str:
        state = await self.get_state(raw_code)
        return select_random_fact(state, self.rng)

    # ─── Mutations ──────────────────────────────────────────────

    async def add_funfacts(
        self, raw_code: str | None, raw_body: bytes,
    ) -> OverlayLike:
        record = resolve_state(self.catalog, raw_code, mutation=True)
        body = FunfactsCreate.from_payload(decode_body(raw_body))
        return await self.store.upsert_append(record.code, body.funfacts)

    async def update_funfact(
        self, raw_code: str | None, raw_body: bytes,
    ) -> OverlayLike:
        record = resolve_state(self.catalog, raw_code, mutation=True)
        body = FunfactUpdate.from_payload(decode_body(raw_body))
        return await self.store.replace_at(record, body.index, body.funfact)

    async def delete_funfact(
        self, raw_code: str | None, raw_body: bytes,
    ) -> OverlayLike:
        record = resolve_state(self.catalog, raw_code, mutation=True)
        body = FunfactDelete.from_payload(decode_body(raw_body))
        return await self.store.remove_at(record, body.index)
