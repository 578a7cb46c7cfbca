"""
typeid_sdk
──────────
Stable top-level exports. Import from here, not from sub-modules directly.
Every name exported here is part of the public API and subject to semver.
"""
from typeid_sdk.tier0_core.errors import (
    TypeIDError,
    InvalidPrefixError,
    EmptyPrefixWithSeparatorError,
    PrefixMismatchError,
    InvalidFormatError,
    SuffixDecodeError,
    InvalidSuffixLengthError,
    InvalidSuffixRangeError,
    InvalidSuffixAlphabetError,
    InvalidByteLengthError,
    InvalidUUIDError,
)
from typeid_sdk.tier0_core.config import get_config, TypeIDSettings
from typeid_sdk.tier0_core.logging import get_logger, bind_context, clear_context
from typeid_sdk.tier0_core.ids import (
    new_uuid4,
    new_uuid7,
    new_uuid7_bytes,
    parse_uuid,
    format_uuid,
)
from typeid_sdk.tier0_core.base32 import encode, decode, ALPHABET

from typeid_sdk.tier1_runtime.typeid import (
    TypeID,
    TypeIDParts,
    typeid,
    from_string,
    from_uuid,
    from_uuid_bytes,
    parse_typeid,
    get_type,
    get_suffix,
    is_typeid,
    to_uuid,
    to_uuid_bytes,
)
from typeid_sdk.tier1_runtime.validate import TypeIDField, validate_typeid

__version__ = "0.1.0"
__all__ = [
    # errors
    "TypeIDError", "InvalidPrefixError", "EmptyPrefixWithSeparatorError",
    "PrefixMismatchError", "InvalidFormatError", "SuffixDecodeError",
    "InvalidSuffixLengthError", "InvalidSuffixRangeError",
    "InvalidSuffixAlphabetError", "InvalidByteLengthError", "InvalidUUIDError",
    # config
    "get_config", "TypeIDSettings",
    # logging
    "get_logger", "bind_context", "clear_context",
    # ids
    "new_uuid4", "new_uuid7", "new_uuid7_bytes", "parse_uuid", "format_uuid",
    # base32
    "encode", "decode", "ALPHABET",
    # typeid
    "TypeID", "TypeIDParts", "typeid", "from_string", "from_uuid",
    "from_uuid_bytes", "parse_typeid", "get_type", "get_suffix",
    "is_typeid", "to_uuid", "to_uuid_bytes",
    # validate
    "TypeIDField", "validate_typeid",
]
