"""
Verification Models
===================

Records held by the verification registry.

Version: 0.1.0
"""

from __future__ import annotations

import copy
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

from services.verification.errors import AttemptsExceededError


class BiometricType(str, Enum):
    """Supported biometric modalities."""

    FINGERPRINT = "fingerprint"
    FACIAL = "facial"
    IRIS = "iris"

    @classmethod
    def values(cls) -> set[str]:
        return {member.value for member in cls}


@dataclass
class VerificationRecord:
    """A biometric-verification claim for one identity."""

    verification_id: int
    identity: str
    credential_hash: str
    salt: int
    expiration: int
    created_at: int
    last_updated_at: int
    verifier: str
    biometric_type: BiometricType
    confidence_score: int
    grace_period: int  # stored for consumers, not enforced
    location: str
    device_id: str
    min_confidence: int
    max_attempts: int
    status: bool = False
    attempts: int = 0

    def is_expired(self, block_height: int) -> bool:
        """Expired once the height moves past ``expiration``."""
        return block_height > self.expiration

    @property
    def attempts_remaining(self) -> int:
        return self.max_attempts - self.attempts

    def ensure_attempt_available(self) -> None:
        """Raise if the attempt budget is exhausted."""
        if self.attempts_remaining <= 0:
            raise AttemptsExceededError(self.verification_id, self.max_attempts)

    def consume_attempt(self) -> int:
        """
        Increment the shared attempt counter.

        Both verification performance and manual attempt increments go
        through here so ``attempts <= max_attempts`` always holds.

        Returns:
            The new attempt count.

        Raises:
            AttemptsExceededError: If no attempt remains.
        """
        self.ensure_attempt_available()
        self.attempts += 1
        return self.attempts

    def reset_attempts(self) -> None:
        self.attempts = 0

    def copy(self) -> VerificationRecord:
        return copy.copy(self)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["biometric_type"] = self.biometric_type.value
        return data


@dataclass(frozen=True)
class VerificationUpdate:
    """Latest amendment of a record's credential material."""

    verification_id: int
    new_hash: str
    new_salt: int
    new_expiration: int
    updated_at: int
    updater: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
