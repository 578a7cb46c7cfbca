"""Tests for tier0_core modules."""
from __future__ import annotations

import copy
import os
import pickle
import uuid

import pytest
from pydantic import ValidationError as PydanticValidationError
from structlog.testing import capture_logs

from typeid_sdk.tier0_core import base32
from typeid_sdk.tier0_core.config import TypeIDSettings, get_config
from typeid_sdk.tier0_core.errors import (
    InvalidByteLengthError,
    InvalidFormatError,
    InvalidPrefixError,
    InvalidSuffixAlphabetError,
    InvalidSuffixLengthError,
    InvalidSuffixRangeError,
    InvalidUUIDError,
    PrefixMismatchError,
    SuffixDecodeError,
    TypeIDError,
)
from typeid_sdk.tier0_core.ids import (
    format_uuid,
    new_uuid4,
    new_uuid7,
    new_uuid7_bytes,
    parse_uuid,
)
from typeid_sdk.tier0_core.logging import get_logger


# ── errors ─────────────────────────────────────────────────────────────────

class TestErrors:
    def test_errors_are_value_errors(self):
        e = InvalidPrefixError("TEST")
        assert isinstance(e, TypeIDError)
        assert isinstance(e, ValueError)

    def test_invalid_prefix_message_states_rule(self):
        e = InvalidPrefixError("TEST")
        assert str(e) == "Invalid prefix. Must be at most 63 ascii letters [a-z]"
        assert e.code == "invalid_prefix"
        assert e.metadata == {"prefix": "TEST"}

    def test_suffix_length_names_actual_length(self):
        e = InvalidSuffixLengthError(3)
        assert e.length == 3
        assert "got 3" in str(e)

    def test_prefix_mismatch_names_both_values(self):
        e = PrefixMismatchError("user", "order")
        assert "Expected user" in str(e)
        assert "got order" in str(e)

    def test_codec_errors_share_base(self):
        assert issubclass(InvalidSuffixLengthError, SuffixDecodeError)
        assert issubclass(InvalidSuffixRangeError, SuffixDecodeError)
        assert issubclass(InvalidSuffixAlphabetError, SuffixDecodeError)
        assert not issubclass(InvalidFormatError, SuffixDecodeError)

    def test_to_dict(self):
        d = InvalidFormatError("a_b_c").to_dict()
        assert d == {
            "error": {"code": "invalid_format", "message": "Invalid TypeID format: a_b_c"}
        }

    def test_alphabet_error_detail_has_position(self):
        e = InvalidSuffixAlphabetError("x" * 26, "u", 4)
        assert e.position == 4
        assert "position 4" in e.detail

    def test_no_capture_by_default(self):
        get_logger(__name__)
        with capture_logs() as logs:
            InvalidPrefixError("TEST")
        assert logs == []

    def test_log_backend_emits_rejection(self, capture_rejections):
        with capture_logs() as logs:
            InvalidSuffixLengthError(3)
        assert len(logs) == 1
        assert logs[0]["event"] == "typeid.rejected"
        assert logs[0]["code"] == "invalid_suffix_length"
        assert logs[0]["length"] == 3
        assert logs[0]["log_level"] == "warning"

    def test_bad_settings_do_not_mask_codec_error(self, monkeypatch):
        monkeypatch.setenv("TYPEID_ENV", "prod")
        with pytest.raises(InvalidSuffixLengthError, match="got 3"):
            base32.decode("abc")

    @pytest.mark.parametrize("error", [
        InvalidPrefixError("TEST"),
        PrefixMismatchError("user", "order"),
        InvalidSuffixLengthError(3),
        InvalidSuffixAlphabetError("x" * 26, "u", 4),
        InvalidUUIDError("nope"),
    ])
    def test_errors_survive_pickle_and_copy(self, error):
        for clone in (pickle.loads(pickle.dumps(error)), copy.copy(error), copy.deepcopy(error)):
            assert type(clone) is type(error)
            assert str(clone) == str(error)
            assert clone.code == error.code
            assert clone.metadata == error.metadata
            assert clone.to_dict() == error.to_dict()

    def test_unpickled_alphabet_error_keeps_attributes(self):
        clone = pickle.loads(pickle.dumps(InvalidSuffixAlphabetError("x" * 26, "u", 4)))
        assert clone.char == "u"
        assert clone.position == 4


# ── config ─────────────────────────────────────────────────────────────────

class TestConfig:
    def test_defaults_under_test_env(self):
        config = get_config()
        assert config.is_test
        assert config.error_backend == "none"
        assert config.log_format == "json"

    def test_config_is_cached(self):
        assert get_config() is get_config()

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("TYPEID_LOG_FORMAT", "CONSOLE")
        assert TypeIDSettings().log_format == "console"

    def test_invalid_environment_rejected(self, monkeypatch):
        monkeypatch.setenv("TYPEID_ENV", "moon")
        with pytest.raises(PydanticValidationError):
            TypeIDSettings()

    def test_invalid_error_backend_rejected(self, monkeypatch):
        monkeypatch.setenv("TYPEID_ERROR_BACKEND", "sentry")
        with pytest.raises(PydanticValidationError):
            TypeIDSettings()


# ── ids ────────────────────────────────────────────────────────────────────

class TestIds:
    def test_uuid4_format(self):
        uid = new_uuid4()
        assert len(uid) == 36
        assert uid.count("-") == 4

    def test_uuid7_has_version_7(self):
        assert uuid.UUID(new_uuid7()).version == 7

    def test_uuid7_bytes_length(self):
        assert len(new_uuid7_bytes()) == 16

    def test_parse_and_format_round_trip(self, uuid_text):
        data = parse_uuid(uuid_text)
        assert len(data) == 16
        assert format_uuid(data) == uuid_text

    def test_parse_uppercase_formats_lowercase(self, uuid_text):
        assert format_uuid(parse_uuid(uuid_text.upper())) == uuid_text

    @pytest.mark.parametrize("text", ["", "not-a-uuid", "01889c89-df6b-7f1c-a388-91396ec314b"])
    def test_parse_invalid(self, text):
        with pytest.raises(InvalidUUIDError):
            parse_uuid(text)

    def test_format_wrong_length(self):
        with pytest.raises(InvalidByteLengthError):
            format_uuid(b"\x00" * 15)


# ── base32 ─────────────────────────────────────────────────────────────────

class TestBase32:
    def test_alphabet_excludes_ambiguous_letters(self):
        assert len(base32.ALPHABET) == 32
        assert not set("ilou") & set(base32.ALPHABET)

    def test_encode_zero(self):
        assert base32.encode(bytes(16)) == "0" * 26

    def test_encode_max(self):
        assert base32.encode(b"\xff" * 16) == "7" + "z" * 25

    def test_encode_known_uuid(self):
        data = uuid.UUID("01890a5d-ac96-774b-bcce-b302099a8057").bytes
        assert base32.encode(data) == "01h455vb4pex5vsknk084sn02q"

    def test_decode_known_suffix(self):
        assert base32.decode("0123456789abcdefghjkmnpqrs") == uuid.UUID(
            "0110c853-1d09-52d8-d73e-1194e95b5f19"
        ).bytes

    def test_encode_accepts_bytearray(self):
        assert base32.encode(bytearray(16)) == "0" * 26

    def test_round_trip_random_values(self):
        for _ in range(64):
            data = os.urandom(16)
            suffix = base32.encode(data)
            assert suffix[0] in "01234567"
            assert base32.decode(suffix) == data

    def test_encoding_preserves_order(self):
        values = sorted(os.urandom(16) for _ in range(32))
        assert [base32.encode(v) for v in values] == sorted(base32.encode(v) for v in values)

    @pytest.mark.parametrize("length", [0, 15, 17, 32])
    def test_encode_wrong_length(self, length):
        with pytest.raises(InvalidByteLengthError):
            base32.encode(bytes(length))

    @pytest.mark.parametrize("text", ["", "0" * 25, "0" * 27])
    def test_decode_wrong_length(self, text):
        with pytest.raises(InvalidSuffixLengthError):
            base32.decode(text)

    @pytest.mark.parametrize("char", ["i", "l", "o", "u", "A", "-", " "])
    def test_decode_rejects_foreign_characters(self, char):
        text = "0" * 10 + char + "0" * 15
        with pytest.raises(InvalidSuffixAlphabetError) as exc:
            base32.decode(text)
        assert exc.value.char == char
        assert exc.value.position == 10

    @pytest.mark.parametrize("first", ["8", "9", "a", "z"])
    def test_decode_rejects_overflow(self, first):
        with pytest.raises(InvalidSuffixRangeError):
            base32.decode(first + "z" * 25)

    def test_decode_checks_alphabet_before_range(self):
        with pytest.raises(InvalidSuffixAlphabetError):
            base32.decode("8" + "u" * 25)
