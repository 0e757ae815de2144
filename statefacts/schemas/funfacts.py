"""Fun-Fact Payload Schemas — explicit request bodies for overlay mutations.

Invariants:
    - decode_body() turns raw request bytes into JSON; empty body means None,
      undecodable body raises InvalidPayloadError
    - FunfactsCreate.funfacts: required JSON array of strings (may be empty)
    - FunfactUpdate.index / FunfactDelete.index: a JSON number with an integral value
      (1 and 1.0 accepted; "1", true and 1.5 rejected)
    - FunfactUpdate.funfact: non-empty string
    - from_payload() is the only constructor the service uses: any pydantic failure
      becomes InvalidPayloadError with the client-facing message

Design Decisions:
    - Range checks deliberately absent: index bounds depend on stored data (core/enforce_funfacts.py)
    - Bodies decoded after the state code is validated, so a bad code wins over a bad body,
      malformed JSON included
"""

import json
from typing import Annotated, Any

from pydantic import (
    BaseModel, BeforeValidator, Field, StrictStr, ValidationError,
    field_validator,
)
from pydantic_core import PydanticCustomError

from statefacts.core.errors import InvalidPayloadError


BODY_NOT_JSON = "Request body must be valid JSON"
FUNFACTS_REQUIRED = "State fun facts value required"
FUNFACTS_NOT_ARRAY = "State fun facts value must be an array"
FUNFACTS_NOT_STRINGS = "State fun facts value must be an array of strings"
INDEX_REQUIRED = "State fun fact index value required"
FUNFACT_REQUIRED = "State fun fact value required"


def decode_body(raw: bytes) -> Any:
    """Parse a raw request body. Blank bodies decode to None."""
    if not raw or not raw.strip():
        return None
    try:
        return json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError):
        raise InvalidPayloadError(BODY_NOT_JSON, "body")


def _integral_number(v: Any) -> Any:
    # bool is an int subclass but not a JSON number
    if isinstance(v, bool):
        raise PydanticCustomError("index_not_number", INDEX_REQUIRED)
    if isinstance(v, int):
        return v
    if isinstance(v, float) and v.is_integer():
        return int(v)
    raise PydanticCustomError("index_not_number", INDEX_REQUIRED)


FunfactIndex = Annotated[int, BeforeValidator(_integral_number)]


def _first_error_field(exc: ValidationError) -> tuple[str, dict]:
    error = exc.errors()[0]
    field = str(error["loc"][0]) if error["loc"] else ""
    return field, error


class FunfactsCreate(BaseModel):
    """POST body — facts to append to the state's overlay."""
    funfacts: list[StrictStr]

    @field_validator("funfacts", mode="before")
    @classmethod
    def require_array(cls, v: Any) -> Any:
        if v is None:
            raise PydanticCustomError("funfacts_required", FUNFACTS_REQUIRED)
        if not isinstance(v, list):
            raise PydanticCustomError("funfacts_not_array", FUNFACTS_NOT_ARRAY)
        return v

    @classmethod
    def from_payload(cls, payload: Any) -> "FunfactsCreate":
        try:
            return cls.model_validate(payload if isinstance(payload, dict) else {})
        except ValidationError as exc:
            _, error = _first_error_field(exc)
            if error["type"] == "missing":
                raise InvalidPayloadError(FUNFACTS_REQUIRED, "funfacts")
            if error["type"] in ("funfacts_required", "funfacts_not_array"):
                raise InvalidPayloadError(error["msg"], "funfacts")
            raise InvalidPayloadError(FUNFACTS_NOT_STRINGS, "funfacts")


class FunfactUpdate(BaseModel):
    """PATCH body — replace the fact at a 1-based index."""
    index: FunfactIndex
    funfact: StrictStr = Field(min_length=1)

    @classmethod
    def from_payload(cls, payload: Any) -> "FunfactUpdate":
        try:
            return cls.model_validate(payload if isinstance(payload, dict) else {})
        except ValidationError as exc:
            field, _ = _first_error_field(exc)
            if field == "index":
                raise InvalidPayloadError(INDEX_REQUIRED, "index")
            raise InvalidPayloadError(FUNFACT_REQUIRED, "funfact")


class FunfactDelete(BaseModel):
    """DELETE body — remove the fact at a 1-based index."""
    index: FunfactIndex

    @classmethod
    def from_payload(cls, payload: Any) -> "FunfactDelete":
        try:
            return cls.model_validate(payload if isinstance(payload, dict) else {})
        except ValidationError:
            raise InvalidPayloadError(INDEX_REQUIRED, "index")
