"""
typeid_sdk.tier0_core.errors
─────────────────────────────
Error taxonomy for TypeID parsing, construction and codec failures. Every
error carries a stable machine-readable code so callers can branch on the
violated rule instead of matching message text.

All errors subclass ValueError: a malformed identifier is a bad value.
Optional capture: TYPEID_ERROR_BACKEND=none|log
"""
from __future__ import annotations

from typing import Any

from pydantic import ValidationError as SettingsValidationError


# ── Base error ────────────────────────────────────────────────────────────────

class TypeIDError(ValueError):
    """
    Base class for all TypeID errors. Every error has:
    - code: stable machine-readable string (snake_case)
    - user_message: safe to surface to end users
    - detail: internal context (defaults to user_message)
    - metadata: structured values describing the rejected input
    """

    status_code: int = 422
    code: str = "typeid_error"

    def __init__(
        self,
        user_message: str = "Invalid TypeID.",
        detail: str | None = None,
        **metadata: Any,
    ) -> None:
        self.user_message = user_message
        self.detail = detail or user_message
        self.metadata = metadata
        super().__init__(self.detail)
        _capture(self)

    def __reduce__(self) -> tuple:
        # Subclass __init__ signatures differ; rebuild from state, not args.
        return (_restore_error, (self.__class__, self.args, self.__dict__.copy()))

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.user_message,
            }
        }


def _restore_error(
    cls: type[TypeIDError], args: tuple, state: dict[str, Any]
) -> TypeIDError:
    """Unpickle without re-running __init__ (and so without re-capturing)."""
    error = cls.__new__(cls)
    error.args = args
    error.__dict__.update(state)
    return error


# ── Prefix errors ─────────────────────────────────────────────────────────────

class InvalidPrefixError(TypeIDError):
    """Prefix is longer than 63 characters or contains a non a-z character."""
    code = "invalid_prefix"

    def __init__(self, prefix: str) -> None:
        super().__init__(
            "Invalid prefix. Must be at most 63 ascii letters [a-z]",
            prefix=prefix,
        )


class EmptyPrefixWithSeparatorError(TypeIDError):
    """A separator is present but nothing precedes it."""
    code = "empty_prefix_with_separator"

    def __init__(self, value: str) -> None:
        super().__init__(
            "Invalid TypeID. Prefix cannot be empty when there's a separator: "
            f"{value}",
            value=value,
        )


class PrefixMismatchError(TypeIDError):
    code = "prefix_mismatch"

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid TypeID. Prefix mismatch. Expected {expected}, got {actual}",
            expected=expected,
            actual=actual,
        )


class InvalidFormatError(TypeIDError):
    """More than one separator; prefixes never contain an underscore."""
    code = "invalid_format"

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid TypeID format: {value}", value=value)


# ── Suffix / codec errors ─────────────────────────────────────────────────────

class SuffixDecodeError(TypeIDError):
    """Base for every failure raised while decoding a suffix."""
    code = "invalid_suffix"


class InvalidSuffixLengthError(SuffixDecodeError):
    code = "invalid_suffix_length"

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(
            f"Invalid length. Suffix should have 26 characters, got {length}",
            length=length,
        )


class InvalidSuffixRangeError(SuffixDecodeError):
    """First character above '7': the value would not fit in 128 bits."""
    code = "invalid_suffix_range"

    def __init__(self, suffix: str) -> None:
        super().__init__(
            "Invalid suffix. First character must be in the range [0-7]",
            suffix=suffix,
        )


class InvalidSuffixAlphabetError(SuffixDecodeError):
    code = "invalid_suffix_alphabet"

    def __init__(self, suffix: str, char: str, position: int) -> None:
        self.char = char
        self.position = position
        super().__init__(
            "Invalid suffix. Characters must be in the base32 alphabet "
            "[0-9a-hjkmnp-tv-z]",
            detail=f"Invalid suffix character {char!r} at position {position}",
            suffix=suffix,
            char=char,
            position=position,
        )


# ── Byte / UUID errors ────────────────────────────────────────────────────────

class InvalidByteLengthError(TypeIDError):
    code = "invalid_byte_length"

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(
            f"Invalid byte length. Expected 16 bytes, got {length}",
            length=length,
        )


class InvalidUUIDError(TypeIDError):
    code = "invalid_uuid"

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid UUID string: {value!r}", value=value)


# ── Error capture backend ─────────────────────────────────────────────────────

def _capture(error: TypeIDError) -> None:
    """Report error to the configured backend. Called by TypeIDError.__init__."""
    from typeid_sdk.tier0_core.config import get_config

    try:
        backend = get_config().error_backend
    except SettingsValidationError:
        # Bad settings must not mask the error being raised.
        return
    if backend != "log":
        return
    from typeid_sdk.tier0_core.logging import get_logger

    get_logger(__name__).warning(
        "typeid.rejected",
        code=error.code,
        message=error.detail,
        **error.metadata,
    )


__sdk_export__ = {
    "exports": [
        "TypeIDError", "InvalidPrefixError", "EmptyPrefixWithSeparatorError",
        "PrefixMismatchError", "InvalidFormatError", "SuffixDecodeError",
        "InvalidSuffixLengthError", "InvalidSuffixRangeError",
        "InvalidSuffixAlphabetError", "InvalidByteLengthError",
        "InvalidUUIDError",
    ],
    "description": "Error taxonomy for TypeID validation and codec failures",
    "tier": "tier0_core",
    "module": "errors",
}
