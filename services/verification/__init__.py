"""
Verification Service
====================

Biometric-verification claim registry.

This service provides:
- Claim creation gated by a one-shot, fee-collecting authority
- Verification attempts against the stored credential hash
- Credential amendment with a latest-amendment audit trail
- Revocation by the identity or the verifier

Usage:
    from services.verification import create_registry

    registry = create_registry()
    registry.set_authority("ST1ADMIN", "ST2AUTHORITY")
    verification_id = registry.initiate_verification("ST1VERIFIER", "STUSER", ...)

Version: 0.1.0
"""

from services.verification.audit import UpdateAuditTrail
from services.verification.authority import AuthorityGate
from services.verification.errors import ErrorCode, ErrorKind, VerificationError
from services.verification.main import create_registry
from services.verification.models import (
    BiometricType,
    VerificationRecord,
    VerificationUpdate,
)
from services.verification.registry import VerificationRegistry, VerifierPolicy

__version__ = "0.1.0"

__all__ = [
    "AuthorityGate",
    "BiometricType",
    "ErrorCode",
    "ErrorKind",
    "UpdateAuditTrail",
    "VerificationError",
    "VerificationRecord",
    "VerificationRegistry",
    "VerificationUpdate",
    "VerifierPolicy",
    "create_registry",
]
