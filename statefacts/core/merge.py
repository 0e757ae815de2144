"""Merge Engine — combines catalog records with the fun-fact overlay into effective states.

Invariants:
    - All functions are PURE: no IO, no mutation of catalog or overlay input
    - Overlay list wins only when non-empty; otherwise catalog defaults apply (never mixed)
    - merge_all preserves catalog order
    - select_random_fact only ever returns an element of the effective list

Design Decisions:
    - Random source injected as a Protocol (randrange): tests pass a deterministic stub
    - Empty overlay falls back to defaults, so deleting the last stored fact
      re-exposes the catalog facts on read
"""

from dataclasses import dataclass
from typing import Mapping, Protocol, Sequence

from statefacts.core.catalog import StateCatalog, StateRecord
from statefacts.core.domain_types import (
    NON_CONTIGUOUS_CODES, Contiguity, StateField,
)
from statefacts.core.errors import NoFactsFoundError


class RandomSource(Protocol):
    """Uniform integer generator over [0, stop). random.Random satisfies it."""
    def randrange(self, stop: int) -> int: ...


@dataclass(frozen=True)
class EffectiveState:
    """Catalog record plus the fun facts a client should see."""
    record: StateRecord
    funfacts: tuple[str, ...]

    @property
    def code(self) -> str:
        return self.record.code

    def to_dict(self) -> dict:
        data = self.record.to_dict()
        if self.funfacts:
            data["funfacts"] = list(self.funfacts)
        return data


def effective_funfacts(
    record: StateRecord, overlay: Sequence[str] | None,
) -> tuple[str, ...]:
    """Overlay facts when present and non-empty, else the catalog defaults."""
    if overlay:
        return tuple(overlay)
    return record.default_funfacts


def merge_state(
    record: StateRecord, overlay: Sequence[str] | None,
) -> EffectiveState:
    return EffectiveState(record=record, funfacts=effective_funfacts(record, overlay))


def matches_contiguity(code: str, contiguity: Contiguity) -> bool:
    if contiguity is Contiguity.CONTIGUOUS:
        return code not in NON_CONTIGUOUS_CODES
    if contiguity is Contiguity.NON_CONTIGUOUS:
        return code in NON_CONTIGUOUS_CODES
    return True


def merge_all(
    catalog: StateCatalog,
    overlays: Mapping[str, Sequence[str]],
    contiguity: Contiguity = Contiguity.ALL,
) -> list[EffectiveState]:
    """Every catalog state (filtered by contiguity) with its overlay applied."""
    return [
        merge_state(record, overlays.get(record.code))
        for record in catalog
        if matches_contiguity(record.code, contiguity)
    ]


def select_random_fact(
    state: EffectiveState, rng: RandomSource,
) -> str:
    """Pick one fact uniformly. Raises NoFactsFoundError on an empty list."""
    if not state.funfacts:
        raise NoFactsFoundError(state.record.name)
    return state.funfacts[rng.randrange(len(state.funfacts))]


def field_value(record: StateRecord, state_field: StateField) -> dict:
    """Single-field view: {"state": name, <key>: value}."""
    if state_field is StateField.CAPITAL:
        return {"state": record.name, "capital": record.capital}
    if state_field is StateField.NICKNAME:
        return {"state": record.name, "nickname": record.nickname}
    if state_field is StateField.POPULATION:
        return {"state": record.name, "population": f"{record.population:,}"}
    return {"state": record.name, "admitted": record.admitted.isoformat()}
