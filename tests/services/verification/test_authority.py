"""
Authority Gate Tests
====================

Tests for the one-shot authority and the fee/ceiling setters.

Version: 0.1.0
"""

import pytest

from services.verification.authority import AuthorityGate
from services.verification.errors import (
    AuthorityAlreadyConfiguredError,
    AuthorityNotConfiguredError,
    ErrorCode,
    NotAuthorizedError,
    ValidationFailedError,
)
from tests.conftest import AUTHORITY, CALLER, NULL_PRINCIPAL, OTHER


class TestSetAuthority:
    """Tests for the one-shot authority."""

    def test_set_authority(self, gate: AuthorityGate) -> None:
        gate.set_authority(CALLER, AUTHORITY)

        assert gate.authority == AUTHORITY
        assert gate.is_configured is True
        assert gate.require_authority() == AUTHORITY

    def test_second_set_rejected_for_any_caller(self, gate: AuthorityGate) -> None:
        gate.set_authority(CALLER, AUTHORITY)

        for caller in (CALLER, AUTHORITY, OTHER):
            with pytest.raises(AuthorityAlreadyConfiguredError) as exc_info:
                gate.set_authority(caller, "ST9NEW")
            assert exc_info.value.code == ErrorCode.AUTHORITY_ALREADY_SET

        assert gate.authority == AUTHORITY

    def test_same_account_twice_rejected(self, gate: AuthorityGate) -> None:
        gate.set_authority(CALLER, AUTHORITY)

        with pytest.raises(AuthorityAlreadyConfiguredError):
            gate.set_authority(CALLER, AUTHORITY)

    def test_null_principal_rejected(self, gate: AuthorityGate) -> None:
        with pytest.raises(ValidationFailedError) as exc_info:
            gate.set_authority(CALLER, NULL_PRINCIPAL)

        assert exc_info.value.field == "principal"
        assert gate.is_configured is False

        # A rejected attempt does not consume the one-shot
        gate.set_authority(CALLER, AUTHORITY)
        assert gate.authority == AUTHORITY

    def test_require_authority_unconfigured(self, gate: AuthorityGate) -> None:
        with pytest.raises(AuthorityNotConfiguredError) as exc_info:
            gate.require_authority()

        assert exc_info.value.code == ErrorCode.AUTHORITY_NOT_VERIFIED


class TestConfigSetters:
    """Tests for fee and ceiling changes."""

    def test_fee_requires_authority(self, gate: AuthorityGate) -> None:
        with pytest.raises(AuthorityNotConfiguredError):
            gate.set_verification_fee(CALLER, 1000)

        with pytest.raises(AuthorityNotConfiguredError):
            gate.set_max_verifications(CALLER, 5)

        assert gate.verification_fee == 500
        assert gate.max_verifications == 10_000

    def test_any_caller_may_change_when_unrestricted(self, gate: AuthorityGate) -> None:
        gate.set_authority(CALLER, AUTHORITY)

        gate.set_verification_fee(OTHER, 1000)
        gate.set_max_verifications(OTHER, 5)

        assert gate.verification_fee == 1000
        assert gate.max_verifications == 5

    def test_restricted_gate_requires_authority_caller(self) -> None:
        gate = AuthorityGate(
            null_principal=NULL_PRINCIPAL,
            max_verifications=10,
            verification_fee=500,
            restrict_to_authority=True,
        )
        gate.set_authority(CALLER, AUTHORITY)

        with pytest.raises(NotAuthorizedError):
            gate.set_verification_fee(OTHER, 1000)
        with pytest.raises(NotAuthorizedError):
            gate.set_max_verifications(CALLER, 1)

        gate.set_verification_fee(AUTHORITY, 1000)
        gate.set_max_verifications(AUTHORITY, 1)

        assert gate.verification_fee == 1000
        assert gate.max_verifications == 1

    def test_zero_values_allowed(self, gate: AuthorityGate) -> None:
        gate.set_authority(CALLER, AUTHORITY)

        gate.set_verification_fee(CALLER, 0)
        gate.set_max_verifications(CALLER, 0)

        assert gate.verification_fee == 0
        assert gate.max_verifications == 0

    def test_negative_values_rejected(self, gate: AuthorityGate) -> None:
        gate.set_authority(CALLER, AUTHORITY)

        with pytest.raises(ValidationFailedError) as exc_info:
            gate.set_verification_fee(CALLER, -1)
        assert exc_info.value.code == ErrorCode.INVALID_UPDATE_PARAM

        with pytest.raises(ValidationFailedError):
            gate.set_max_verifications(CALLER, -1)

        assert gate.verification_fee == 500

    def test_defaults_come_from_settings(self) -> None:
        gate = AuthorityGate()

        assert gate.null_principal == NULL_PRINCIPAL
        assert gate.verification_fee == 500
        assert gate.max_verifications == 10_000
        assert gate.restrict_to_authority is False
