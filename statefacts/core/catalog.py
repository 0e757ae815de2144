"""Reference Catalog — immutable, eagerly-built lookup table of the fifty state records.

Invariants:
    - Exactly one StateRecord per canonical uppercase code
    - Catalog order is dataset order (alphabetical by state name)
    - No mutation API: records are frozen, the index is a read-only mapping
    - load_catalog is the only IO in this module; lookups are pure

Design Decisions:
    - Built once in the app lifespan and injected via FastAPI dependency,
      not imported as a module-level global (tests build their own)
    - default_funfacts stored as tuple: the frozen record stays hashable and
      merge results never alias catalog storage
"""

import json
import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping

from statefacts.core.domain_types import StateCode

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "data" / "states.json"


@dataclass(frozen=True)
class StateRecord:
    """One row of the reference dataset."""
    code: StateCode
    name: str
    slug: str
    capital: str
    nickname: str
    population: int
    population_rank: int
    admitted: date
    admission_number: int
    default_funfacts: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        """Serialize in the dataset's public JSON shape (without fun facts)."""
        return {
            "state": self.name,
            "slug": self.slug,
            "code": self.code,
            "nickname": self.nickname,
            "capital_city": self.capital,
            "population": self.population,
            "population_rank": self.population_rank,
            "admission_date": self.admitted.isoformat(),
            "admission_number": self.admission_number,
        }


class StateCatalog:
    """Read-only, ordered collection of StateRecords keyed by code."""

    def __init__(self, records: list[StateRecord]):
        index: dict[str, StateRecord] = {}
        for record in records:
            if record.code in index:
                raise ValueError(f"Duplicate state code in catalog: {record.code}")
            index[record.code] = record
        self._records = tuple(records)
        self._index: Mapping[str, StateRecord] = MappingProxyType(index)

    def lookup(self, code: str) -> StateRecord | None:
        """Exact lookup on the canonical uppercase code."""
        return self._index.get(code)

    def name_of(self, code: str) -> str:
        """Human-readable state name, falling back to the code itself."""
        record = self._index.get(code)
        return record.name if record else code

    @property
    def codes(self) -> tuple[str, ...]:
        return tuple(self._index)

    def __contains__(self, code: object) -> bool:
        return code in self._index

    def __iter__(self) -> Iterator[StateRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)


def record_from_dict(raw: dict) -> StateRecord:
    """Build a StateRecord from one dataset entry."""
    code = str(raw["code"]).upper()
    if len(code) != 2 or not code.isalpha():
        raise ValueError(f"Malformed state code in catalog: {raw['code']!r}")
    population = int(raw["population"])
    if population < 0:
        raise ValueError(f"Negative population for {code}")
    return StateRecord(
        code=StateCode(code),
        name=raw["state"],
        slug=raw.get("slug") or raw["state"].lower().replace(" ", "-"),
        capital=raw["capital_city"],
        nickname=raw["nickname"],
        population=population,
        population_rank=int(raw.get("population_rank", 0)),
        admitted=date.fromisoformat(raw["admission_date"]),
        admission_number=int(raw.get("admission_number", 0)),
        default_funfacts=tuple(raw.get("funfacts") or ()),
    )


def load_catalog(path: str | Path | None = None) -> StateCatalog:
    """Read the states JSON file and build the catalog."""
    source = Path(path) if path else DEFAULT_CATALOG_PATH
    with source.open(encoding="utf-8") as fh:
        entries = json.load(fh)
    catalog = StateCatalog([record_from_dict(entry) for entry in entries])
    logger.info(f"Loaded {len(catalog)} state records from {source.name}")
    return catalog
