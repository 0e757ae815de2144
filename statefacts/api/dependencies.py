"""Route Dependencies — wire catalog, overlay store and random source into StatesService.

Invariants:
    - The catalog comes from app.state (built once in the lifespan), never a module global
    - One SqlOverlayStore per request, bound to the request's DB session

Design Decisions:
    - Each collaborator is its own dependency so tests override exactly one piece
      via app.dependency_overrides
"""

import random

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from statefacts.core.catalog import StateCatalog
from statefacts.core.merge import RandomSource
from statefacts.infrastructure.database import get_db
from statefacts.services.overlay_store import SqlOverlayStore
from statefacts.services.states_service import StatesService

_rng = random.Random()


def get_catalog(request: Request) -> StateCatalog:
    catalog = getattr(request.app.state, "catalog", None)
    if catalog is None:
        raise RuntimeError("State catalog not loaded")
    return catalog


def get_rng() -> RandomSource:
    return _rng


def get_states_service(
    catalog: StateCatalog = Depends(get_catalog),
    db: AsyncSession = Depends(get_db),
    rng: RandomSource = Depends(get_rng),
) -> StatesService:
    return StatesService(catalog, SqlOverlayStore(db), rng)
