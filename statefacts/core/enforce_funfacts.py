"""Fun-Fact Enforcement — validation decision order and pure list mutations.

Invariants:
    - Decision order is fixed: code present -> code in catalog -> payload -> non-empty list -> index range
    - Each check raises on failure (hard stop); nothing is partially applied
    - Index is 1-based from the client's view; valid range is [1, len(funfacts)]
    - Mutations return NEW lists — callers persist the result, input is never modified

Design Decisions:
    - Payload checks (step 3) live in schemas/funfacts.py; this module owns steps 1, 2, 4, 5
    - Two invalid-code texts: reads and mutations were worded differently by the
      original service and clients match on them
"""

from typing import Sequence

from statefacts.core.catalog import StateCatalog, StateRecord
from statefacts.core.domain_types import StateCode
from statefacts.core.errors import (
    IndexOutOfRangeError, InvalidCodeError, MissingParameterError,
    NoFactsFoundError,
)


INVALID_CODE_MESSAGE = "Invalid state abbreviation parameter"


def normalize_code(raw: str | None) -> StateCode:
    """Step 1: code must be present. Returns the uppercase form, unpadded input only."""
    if raw is None or not raw.strip():
        raise MissingParameterError()
    return StateCode(raw.upper())


def resolve_state(
    catalog: StateCatalog, raw: str | None, *, mutation: bool = False,
) -> StateRecord:
    """Steps 1-2: code present and known to the catalog."""
    code = normalize_code(raw)
    record = catalog.lookup(code)
    if record is None:
        message = (
            f"No state matches code {raw}." if mutation else INVALID_CODE_MESSAGE
        )
        raise InvalidCodeError(code, message)
    return record


def check_funfacts_present(
    record: StateRecord, funfacts: Sequence[str] | None,
) -> Sequence[str]:
    """Step 4: stored list must exist and be non-empty."""
    if not funfacts:
        raise NoFactsFoundError(record.name, http_status=400)
    return funfacts


def check_index_in_range(
    record: StateRecord, funfacts: Sequence[str], index: int,
) -> int:
    """Step 5: 1-based index within [1, len]. Returns the 0-based position."""
    if index < 1 or index > len(funfacts):
        raise IndexOutOfRangeError(record.name, index)
    return index - 1


def append_funfacts(
    funfacts: Sequence[str] | None, new_facts: Sequence[str],
) -> list[str]:
    """Append in order; duplicates allowed."""
    return [*(funfacts or ()), *new_facts]


def replace_funfact(
    record: StateRecord, funfacts: Sequence[str] | None, index: int, fact: str,
) -> list[str]:
    """Steps 4-5 then overwrite the element at index-1."""
    present = check_funfacts_present(record, funfacts)
    position = check_index_in_range(record, present, index)
    updated = list(present)
    updated[position] = fact
    return updated


def remove_funfact(
    record: StateRecord, funfacts: Sequence[str] | None, index: int,
) -> list[str]:
    """Steps 4-5 then drop the element at index-1; order of the rest is kept."""
    present = check_funfacts_present(record, funfacts)
    position = check_index_in_range(record, present, index)
    return [fact for i, fact in enumerate(present) if i != position]
