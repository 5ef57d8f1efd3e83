"""
Validator Tests
===============

Boundary checks for every field validator.

Version: 0.1.0
"""

import pytest

from services.verification.errors import ErrorCode, ErrorKind, ValidationFailedError
from services.verification.models import BiometricType
from services.verification.validators import (
    is_valid,
    validate_biometric_type,
    validate_confidence,
    validate_device_id,
    validate_expiration,
    validate_grace_period,
    validate_hash,
    validate_location,
    validate_max_attempts,
    validate_min_confidence,
    validate_non_negative,
    validate_principal,
    validate_salt,
)


NULL_PRINCIPAL = "SP000000000000000000002Q6VF78"


class TestHash:
    def test_exact_length_accepted(self) -> None:
        validate_hash("f" * 64)

    @pytest.mark.parametrize("value", ["", "short", "a" * 63, "a" * 65])
    def test_wrong_length_rejected(self, value: str) -> None:
        with pytest.raises(ValidationFailedError) as exc_info:
            validate_hash(value)

        assert exc_info.value.field == "credential_hash"
        assert exc_info.value.code == ErrorCode.INVALID_HASH_LENGTH
        assert exc_info.value.kind == ErrorKind.VALIDATION_FAILED

    def test_non_string_rejected(self) -> None:
        with pytest.raises(ValidationFailedError):
            validate_hash(b"a" * 64)


class TestSalt:
    def test_positive_accepted(self) -> None:
        validate_salt(1)

    @pytest.mark.parametrize("value", [0, -5, True, "12345"])
    def test_invalid_rejected(self, value: object) -> None:
        with pytest.raises(ValidationFailedError) as exc_info:
            validate_salt(value)

        assert exc_info.value.code == ErrorCode.INVALID_SALT


class TestExpiration:
    def test_must_exceed_height(self) -> None:
        validate_expiration(11, block_height=10)

        with pytest.raises(ValidationFailedError) as exc_info:
            validate_expiration(10, block_height=10)

        assert exc_info.value.code == ErrorCode.INVALID_EXPIRATION


class TestBiometricType:
    @pytest.mark.parametrize("value", ["fingerprint", "facial", "iris", BiometricType.IRIS])
    def test_members_accepted(self, value: object) -> None:
        validate_biometric_type(value)

    @pytest.mark.parametrize("value", ["invalid", "FINGERPRINT", "", 1])
    def test_others_rejected(self, value: object) -> None:
        with pytest.raises(ValidationFailedError) as exc_info:
            validate_biometric_type(value)

        assert exc_info.value.code == ErrorCode.INVALID_BIOMETRIC_TYPE


class TestScores:
    @pytest.mark.parametrize("value", [0, 50, 100])
    def test_in_range(self, value: int) -> None:
        validate_confidence(value)
        validate_min_confidence(value)

    @pytest.mark.parametrize("value", [-1, 101])
    def test_out_of_range(self, value: int) -> None:
        with pytest.raises(ValidationFailedError) as exc_info:
            validate_confidence(value)
        assert exc_info.value.code == ErrorCode.INVALID_CONFIDENCE_SCORE

        with pytest.raises(ValidationFailedError) as exc_info:
            validate_min_confidence(value)
        assert exc_info.value.code == ErrorCode.INVALID_MIN_CONFIDENCE


class TestGracePeriod:
    def test_bounds(self) -> None:
        validate_grace_period(0)
        validate_grace_period(30)

        with pytest.raises(ValidationFailedError) as exc_info:
            validate_grace_period(31)
        assert exc_info.value.code == ErrorCode.INVALID_GRACE_PERIOD

        assert is_valid(validate_grace_period, -1) is False


class TestMetadata:
    def test_location_length(self) -> None:
        validate_location("")
        validate_location("x" * 100)

        with pytest.raises(ValidationFailedError) as exc_info:
            validate_location("x" * 101)
        assert exc_info.value.code == ErrorCode.INVALID_LOCATION

    def test_device_id_length(self) -> None:
        validate_device_id("d" * 64)

        with pytest.raises(ValidationFailedError) as exc_info:
            validate_device_id("d" * 65)
        assert exc_info.value.code == ErrorCode.INVALID_DEVICE_ID


class TestMaxAttempts:
    def test_positive_required(self) -> None:
        validate_max_attempts(1)

        with pytest.raises(ValidationFailedError) as exc_info:
            validate_max_attempts(0)
        assert exc_info.value.code == ErrorCode.INVALID_MAX_ATTEMPTS


class TestPrincipal:
    def test_regular_account_accepted(self) -> None:
        validate_principal("ST2TEST", NULL_PRINCIPAL)

    @pytest.mark.parametrize("value", [NULL_PRINCIPAL, ""])
    def test_burn_and_empty_rejected(self, value: str) -> None:
        with pytest.raises(ValidationFailedError) as exc_info:
            validate_principal(value, NULL_PRINCIPAL)

        assert exc_info.value.field == "principal"
        assert exc_info.value.code == ErrorCode.INVALID_PRINCIPAL


class TestHelpers:
    def test_non_negative(self) -> None:
        validate_non_negative(0, "verification_fee")

        with pytest.raises(ValidationFailedError) as exc_info:
            validate_non_negative(-1, "verification_fee")
        assert exc_info.value.code == ErrorCode.INVALID_UPDATE_PARAM

    def test_is_valid(self) -> None:
        assert is_valid(validate_salt, 12345) is True
        assert is_valid(validate_hash, "short") is False
        assert is_valid(validate_expiration, 5, block_height=4) is True

    def test_error_serialization(self) -> None:
        with pytest.raises(ValidationFailedError) as exc_info:
            validate_salt(0)

        data = exc_info.value.to_dict()
        assert data["error_type"] == "ValidationFailedError"
        assert data["kind"] == "validation_failed"
        assert data["error_code"] == 102
        assert data["context"] == {"field": "salt"}
        assert "[Error Code: 102]" in str(exc_info.value)
