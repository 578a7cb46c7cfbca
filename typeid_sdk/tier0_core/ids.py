"""
typeid_sdk.tier0_core.ids
──────────────────────────
128-bit value source and UUID text helpers. Every generated TypeID suffix
starts life here as a UUID v7 (time-ordered); the hex helpers convert
between the 16-byte value and its standard hyphenated text form.

Minimal stack: uuid7 (uuid_extensions) + stdlib uuid for text formatting
"""
from __future__ import annotations

import uuid

from uuid_extensions import uuid7

from typeid_sdk.tier0_core.errors import InvalidByteLengthError, InvalidUUIDError


# ── Generation ─────────────────────────────────────────────────────────────

def new_uuid4() -> str:
    """Generate a random UUID v4 string."""
    return str(uuid.uuid4())


def new_uuid7() -> str:
    """Generate a time-ordered UUID v7 string (monotonic, sortable)."""
    return str(uuid7())


def new_uuid7_bytes() -> bytes:
    """Generate a UUID v7 and return its 16 raw bytes, big-endian."""
    return uuid7().bytes


# ── Text form ──────────────────────────────────────────────────────────────

def parse_uuid(text: str) -> bytes:
    """
    Parse a hex UUID string into 16 bytes.
    Accepts the forms uuid.UUID does (hyphenated, bare hex, braces, urn:uuid:).
    """
    try:
        return uuid.UUID(text).bytes
    except (ValueError, TypeError, AttributeError) as exc:
        raise InvalidUUIDError(str(text)) from exc


def format_uuid(data: bytes) -> str:
    """Format 16 bytes as a lowercase hyphenated UUID string."""
    if len(data) != 16:
        raise InvalidByteLengthError(len(data))
    return str(uuid.UUID(bytes=bytes(data)))


__sdk_export__ = {
    "exports": ["new_uuid4", "new_uuid7", "new_uuid7_bytes", "parse_uuid", "format_uuid"],
    "description": "UUID v7 generation and hex UUID text conversion",
    "tier": "tier0_core",
    "module": "ids",
}
