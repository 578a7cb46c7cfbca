"""
typeid_sdk.tier1_runtime.validate
──────────────────────────────────
Pydantic v2 integration. Declares TypeID-typed model fields so request
payloads are checked at the boundary with the same rules as from_string().

Usage:
    class CreateOrder(BaseModel):
        user_id: TypeIDField("user")
        order_id: TypeIDField("order") | None = None

    order = CreateOrder.model_validate({"user_id": "user_01h455vb4pex5vsknk084sn02q"})
"""
from __future__ import annotations

from typing import Annotated, Any

from pydantic import AfterValidator

from typeid_sdk.tier0_core.errors import InvalidSuffixLengthError
from typeid_sdk.tier1_runtime.typeid import TypeID, from_string, get_suffix


def validate_typeid(value: Any, prefix: str | None = None) -> TypeID:
    """
    Validate *value* as a canonical TypeID, optionally requiring *prefix*.
    Raises the library's TypeIDError subclasses unchanged.

    Unlike from_string(), an empty suffix is rejected rather than replaced
    by a generated one: a missing value never becomes a new identifier.
    Every value is re-parsed, including TypeID instances.
    """
    if get_suffix(value) == "":
        raise InvalidSuffixLengthError(0)
    return from_string(value, prefix)


def TypeIDField(prefix: str | None = None) -> Any:
    """
    Return an annotated str type that validates as a TypeID.

    With a non-empty *prefix*, a prefixed id whose prefix differs is
    rejected. Failures surface as a pydantic ValidationError whose message
    carries the TypeIDError text.
    """
    return Annotated[str, AfterValidator(lambda v: validate_typeid(v, prefix))]


__sdk_export__ = {
    "exports": ["TypeIDField", "validate_typeid"],
    "description": "Pydantic v2 field type for TypeID validation",
    "tier": "tier1_runtime",
    "module": "validate",
}
