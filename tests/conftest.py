"""
Test Configuration
==================

Pytest fixtures for Bioverify tests.
"""

import os
from typing import Any

import pytest

# Set test environment
os.environ["ENVIRONMENT"] = "testing"
os.environ["LEDGER_MODE"] = "mock"

from shared.ledger import MockLedgerClient  # noqa: E402
from services.verification import (  # noqa: E402
    AuthorityGate,
    VerificationRegistry,
)


# Accounts
CALLER = "ST1TEST"
AUTHORITY = "ST2TEST"
USER = "STUSER"
OTHER = "ST3FAKE"
NULL_PRINCIPAL = "SP000000000000000000002Q6VF78"

HASH_A = "a" * 64
HASH_B = "b" * 64

DEFAULT_FEE = 500
STARTING_BALANCE = 1_000_000


@pytest.fixture
def ledger() -> MockLedgerClient:
    """Fresh mock ledger at height 0."""
    return MockLedgerClient(genesis_height=0, default_balance=STARTING_BALANCE)


@pytest.fixture
def gate() -> AuthorityGate:
    """Authority gate with contract defaults and no authority set."""
    return AuthorityGate(
        null_principal=NULL_PRINCIPAL,
        max_verifications=10_000,
        verification_fee=DEFAULT_FEE,
        restrict_to_authority=False,
    )


@pytest.fixture
def registry(ledger: MockLedgerClient, gate: AuthorityGate) -> VerificationRegistry:
    """Registry without a configured authority."""
    return VerificationRegistry(ledger=ledger, gate=gate)


@pytest.fixture
def configured_registry(registry: VerificationRegistry) -> VerificationRegistry:
    """Registry whose fee authority is AUTHORITY."""
    registry.set_authority(CALLER, AUTHORITY)
    return registry


@pytest.fixture
def claim_params() -> dict[str, Any]:
    """Valid claim for USER."""
    return {
        "identity": USER,
        "credential_hash": HASH_A,
        "salt": 12345,
        "expiration": 1000,
        "biometric_type": "fingerprint",
        "confidence_score": 90,
        "grace_period": 7,
        "location": "LocationX",
        "device_id": "Device123",
        "min_confidence": 80,
        "max_attempts": 3,
    }


@pytest.fixture
def verification_id(
    configured_registry: VerificationRegistry,
    claim_params: dict[str, Any],
) -> int:
    """Id of a claim opened by CALLER for USER."""
    return configured_registry.initiate_verification(CALLER, **claim_params)
