"""State Response Schemas — public response shapes for overlay and random-fact endpoints.

Invariants:
    - OverlayResponse serializes state_code as "stateCode" (document shape clients expect)
    - Effective states are returned as plain dicts: the funfacts key is omitted when empty
"""

from pydantic import BaseModel, ConfigDict, Field


class OverlayResponse(BaseModel):
    """Stored overlay document after a mutation."""
    model_config = ConfigDict(populate_by_name=True)

    state_code: str = Field(alias="stateCode")
    funfacts: list[str]


class FunfactResponse(BaseModel):
    """One randomly selected fun fact."""
    funfact: str
