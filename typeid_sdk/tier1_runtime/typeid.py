"""
typeid_sdk.tier1_runtime.typeid
────────────────────────────────
Construct, parse and deconstruct TypeIDs.

A TypeID is a lowercase type prefix plus a 26-character base32 suffix:

    user_01h455vb4pex5vsknk084sn02q
    01h455vb4pex5vsknk084sn02q          (empty prefix, no separator)

Every constructor validates eagerly and raises on the first violated rule.
Errors from the codec propagate unchanged.

Usage:
    tid = typeid("user")
    tid = from_string("user_01h455vb4pex5vsknk084sn02q", "user")
    prefix, suffix = parse_typeid(tid)
    uuid_text = to_uuid(tid)
"""
from __future__ import annotations

from typing import Generic, NamedTuple, TypeVar

from typeid_sdk.tier0_core import base32, ids
from typeid_sdk.tier0_core.errors import (
    EmptyPrefixWithSeparatorError,
    InvalidFormatError,
    InvalidPrefixError,
    InvalidSuffixLengthError,
    InvalidSuffixRangeError,
    PrefixMismatchError,
)

P = TypeVar("P", bound=str)

SEPARATOR = "_"
MAX_PREFIX_LENGTH = 63


class TypeID(str, Generic[P]):
    """
    Canonical TypeID string. The type parameter tags the expected prefix for
    static checkers only (e.g. ``TypeID[Literal["user"]]``); at runtime a
    TypeID is an ordinary immutable str and compares equal to its text.
    """

    __slots__ = ()


class TypeIDParts(NamedTuple):
    prefix: str
    suffix: str


# ── Grammar ───────────────────────────────────────────────────────────────────

def _is_valid_prefix(prefix: str) -> bool:
    if len(prefix) > MAX_PREFIX_LENGTH:
        return False
    return all("a" <= ch <= "z" for ch in prefix)


def _compose(prefix: str, suffix: str) -> TypeID:
    if prefix:
        return TypeID(f"{prefix}{SEPARATOR}{suffix}")
    return TypeID(suffix)


# ── Construction ──────────────────────────────────────────────────────────────

def typeid(prefix: str = "", suffix: str = "") -> TypeID:
    """
    Build a TypeID from *prefix* and *suffix*. An empty suffix is replaced by
    a freshly generated UUID v7.
    """
    if not isinstance(prefix, str) or not _is_valid_prefix(prefix):
        raise InvalidPrefixError(str(prefix))

    if not suffix:
        suffix = base32.encode(ids.new_uuid7_bytes())

    if len(suffix) != base32.SUFFIX_LENGTH:
        raise InvalidSuffixLengthError(len(suffix))

    if suffix[0] > "7":
        raise InvalidSuffixRangeError(suffix)

    # Decoding is the alphabet gate for caller-supplied suffixes.
    base32.decode(suffix)

    return _compose(prefix, suffix)


def from_string(value: str, prefix: str | None = None) -> TypeID:
    """
    Parse a canonical TypeID string, optionally checking its prefix.

    No separator means an unprefixed id. Exactly one separator splits prefix
    from suffix; more than one is rejected outright since prefixes never
    contain an underscore.
    """
    parts = value.split(SEPARATOR)

    if len(parts) == 1:
        return typeid("", parts[0])

    if len(parts) == 2:
        parsed_prefix, suffix = parts
        if parsed_prefix == "":
            raise EmptyPrefixWithSeparatorError(value)
        if prefix and parsed_prefix != prefix:
            raise PrefixMismatchError(prefix, parsed_prefix)
        return typeid(parsed_prefix, suffix)

    raise InvalidFormatError(value)


def from_uuid_bytes(prefix: str, data: bytes) -> TypeID:
    """Build a TypeID from a 16-byte value. The prefix is validated."""
    if not _is_valid_prefix(prefix):
        raise InvalidPrefixError(prefix)
    return _compose(prefix, base32.encode(data))


def from_uuid(uuid_text: str, prefix: str | None = None) -> TypeID:
    """Build a TypeID from a hex UUID string such as ``01889c89-df6b-...``."""
    return from_uuid_bytes(prefix or "", ids.parse_uuid(uuid_text))


# ── Deconstruction ────────────────────────────────────────────────────────────
# These assume a canonical id and do not re-validate.

def get_type(tid: str) -> str:
    """Return the prefix of *tid*, or "" when it has none."""
    index = tid.find(SEPARATOR)
    if index == -1:
        return ""
    return tid[:index]


def get_suffix(tid: str) -> str:
    index = tid.find(SEPARATOR)
    if index == -1:
        return tid
    return tid[index + 1:]


def parse_typeid(tid: str) -> TypeIDParts:
    return TypeIDParts(get_type(tid), get_suffix(tid))


def to_uuid_bytes(tid: str) -> bytes:
    """Decode the suffix of *tid* to its 16 bytes. The prefix is ignored."""
    return base32.decode(get_suffix(tid))


def to_uuid(tid: str) -> str:
    return ids.format_uuid(to_uuid_bytes(tid))


# ── Predicate ─────────────────────────────────────────────────────────────────

def is_typeid(value: object) -> bool:
    """
    True when *value* is a prefixed TypeID: ``^[a-z]{1,63}_[0-7][base32]{25}$``.

    Narrower than from_string(): an unprefixed id (no separator) is NOT
    matched here, even though it parses. Never raises.
    """
    if not isinstance(value, str):
        return False
    prefix, sep, suffix = value.partition(SEPARATOR)
    if not sep or not prefix or not _is_valid_prefix(prefix):
        return False
    if len(suffix) != base32.SUFFIX_LENGTH or not "0" <= suffix[0] <= "7":
        return False
    return all(ch in base32.ALPHABET for ch in suffix)


__sdk_export__ = {
    "exports": [
        "TypeID", "TypeIDParts", "typeid", "from_string", "from_uuid",
        "from_uuid_bytes", "parse_typeid", "get_type", "get_suffix",
        "is_typeid", "to_uuid", "to_uuid_bytes",
    ],
    "description": "TypeID construction, parsing and UUID interop",
    "tier": "tier1_runtime",
    "module": "typeid",
}
