"""States Routes — catalog reads, random fun facts, and fun-fact overlay mutations.

Invariants:
    - Routes never contain business logic (delegate to StatesService)
    - Mutation bodies are read as raw bytes so a bad state code is reported
      before a bad (even malformed) body
    - Field routes share one helper; the StateField enum selects the value

Design Decisions:
    - Prefix /states with trailing-slash list route, matching existing clients
    - contig query kept as a raw string: only "true"/"false" filter, anything else lists all
"""

from fastapi import APIRouter, Depends, Query, Request

from statefacts.api.dependencies import get_states_service
from statefacts.core.domain_types import StateField, parse_contiguity
from statefacts.schemas.states import FunfactResponse, OverlayResponse
from statefacts.services.states_service import StatesService

router = APIRouter(prefix="/states", tags=["states"])


def _overlay_response(row) -> OverlayResponse:
    return OverlayResponse(state_code=row.state_code, funfacts=list(row.funfacts))


@router.get("/")
async def list_states(
    contig: str | None = Query(None),
    service: StatesService = Depends(get_states_service),
):
    """All states with overlay fun facts merged in."""
    states = await service.list_states(parse_contiguity(contig))
    return [s.to_dict() for s in states]


@router.get("/{state}")
async def get_state(
    state: str, service: StatesService = Depends(get_states_service),
):
    return (await service.get_state(state)).to_dict()


@router.get("/{state}/funfact", response_model=FunfactResponse)
async def get_random_funfact(
    state: str, service: StatesService = Depends(get_states_service),
):
    """One fun fact chosen uniformly at random."""
    return FunfactResponse(funfact=await service.get_random_funfact(state))


@router.post("/{state}/funfact", response_model=OverlayResponse)
async def add_funfacts(
    state: str,
    request: Request,
    service: StatesService = Depends(get_states_service),
):
    """Append fun facts, creating the overlay on first use."""
    row = await service.add_funfacts(state, await request.body())
    return _overlay_response(row)


@router.patch("/{state}/funfact", response_model=OverlayResponse)
async def update_funfact(
    state: str,
    request: Request,
    service: StatesService = Depends(get_states_service),
):
    """Replace the fun fact at a 1-based index."""
    row = await service.update_funfact(state, await request.body())
    return _overlay_response(row)


@router.delete("/{state}/funfact", response_model=OverlayResponse)
async def delete_funfact(
    state: str,
    request: Request,
    service: StatesService = Depends(get_states_service),
):
    """Remove the fun fact at a 1-based index."""
    row = await service.delete_funfact(state, await request.body())
    return _overlay_response(row)


@router.get("/{state}/capital")
async def get_capital(
    state: str, service: StatesService = Depends(get_states_service),
):
    return service.get_field(state, StateField.CAPITAL)


@router.get("/{state}/nickname")
async def get_nickname(
    state: str, service: StatesService = Depends(get_states_service),
):
    return service.get_field(state, StateField.NICKNAME)


@router.get("/{state}/population")
async def get_population(
    state: str, service: StatesService = Depends(get_states_service),
):
    return service.get_field(state, StateField.POPULATION)


@router.get("/{state}/admission")
async def get_admission(
    state: str, service: StatesService = Depends(get_states_service),
):
    return service.get_field(state, StateField.ADMISSION)
