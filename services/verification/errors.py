"""
Verification Errors
===================

Closed error taxonomy for the verification registry.

Every rejected operation raises exactly one of these and leaves registry
state unchanged. ``code`` is the numeric error code the on-ledger
contract reports for the same condition.

Version: 0.1.0
"""

from enum import Enum, IntEnum
from typing import Any


class ErrorKind(str, Enum):
    """Failure categories."""

    NOT_AUTHORIZED = "not_authorized"
    VALIDATION_FAILED = "validation_failed"
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    EXPIRED = "expired"
    ATTEMPTS_EXCEEDED = "attempts_exceeded"
    MISMATCH = "mismatch"
    CONFIDENCE_TOO_LOW = "confidence_too_low"
    AUTHORITY_NOT_CONFIGURED = "authority_not_configured"
    AUTHORITY_ALREADY_CONFIGURED = "authority_already_configured"
    TRANSFER_FAILED = "transfer_failed"


class ErrorCode(IntEnum):
    """Numeric codes reported by the registry contract."""

    NOT_AUTHORIZED = 100
    INVALID_HASH_LENGTH = 101
    INVALID_SALT = 102
    INVALID_EXPIRATION = 103
    INVALID_PRINCIPAL = 104
    TRANSFER_FAILED = 105
    IDENTITY_ALREADY_VERIFIED = 106
    IDENTITY_NOT_FOUND = 107
    AUTHORITY_ALREADY_SET = 108
    AUTHORITY_NOT_VERIFIED = 109
    INVALID_MIN_CONFIDENCE = 110
    INVALID_MAX_ATTEMPTS = 111
    VERIFICATION_EXPIRED = 112
    INVALID_UPDATE_PARAM = 113
    MAX_VERIFICATIONS_EXCEEDED = 114
    INVALID_BIOMETRIC_TYPE = 115
    INVALID_CONFIDENCE_SCORE = 116
    INVALID_GRACE_PERIOD = 117
    INVALID_LOCATION = 118
    INVALID_DEVICE_ID = 119
    CONFIDENCE_TOO_LOW = 120
    ATTEMPTS_EXCEEDED = 121
    HASH_MISMATCH = 122
    SALT_MISMATCH = 123


# Validated field name -> code
FIELD_CODES: dict[str, ErrorCode] = {
    "credential_hash": ErrorCode.INVALID_HASH_LENGTH,
    "salt": ErrorCode.INVALID_SALT,
    "expiration": ErrorCode.INVALID_EXPIRATION,
    "biometric_type": ErrorCode.INVALID_BIOMETRIC_TYPE,
    "confidence_score": ErrorCode.INVALID_CONFIDENCE_SCORE,
    "grace_period": ErrorCode.INVALID_GRACE_PERIOD,
    "location": ErrorCode.INVALID_LOCATION,
    "device_id": ErrorCode.INVALID_DEVICE_ID,
    "min_confidence": ErrorCode.INVALID_MIN_CONFIDENCE,
    "max_attempts": ErrorCode.INVALID_MAX_ATTEMPTS,
    "principal": ErrorCode.INVALID_PRINCIPAL,
    "max_verifications": ErrorCode.INVALID_UPDATE_PARAM,
    "verification_fee": ErrorCode.INVALID_UPDATE_PARAM,
}


class VerificationError(Exception):
    """
    Base exception for all registry failures.

    Parameters
    ----------
    message : str
        Human-readable error message.
    kind : ErrorKind
        Taxonomy category.
    code : ErrorCode
        Numeric contract error code.
    context : dict, optional
        Additional context about the failure.
    """

    kind: ErrorKind
    code: ErrorCode

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        code: ErrorCode,
        context: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.kind = kind
        self.code = code
        self.context = context or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [self.message, f"[Error Code: {int(self.code)}]"]
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f"[Context: {context_str}]")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Dictionary form for structured logging."""
        return {
            "error_type": self.__class__.__name__,
            "kind": self.kind.value,
            "error_code": int(self.code),
            "message": self.message,
            "context": self.context,
        }


class NotAuthorizedError(VerificationError):
    """Caller is not permitted to perform the operation."""

    def __init__(self, caller: str, operation: str) -> None:
        super().__init__(
            f"{caller} is not authorized to {operation}",
            ErrorKind.NOT_AUTHORIZED,
            ErrorCode.NOT_AUTHORIZED,
            {"caller": caller, "operation": operation},
        )


class ValidationFailedError(VerificationError):
    """A supplied field violates its format or range constraint."""

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        super().__init__(
            f"Invalid {field}: {reason}",
            ErrorKind.VALIDATION_FAILED,
            FIELD_CODES.get(field, ErrorCode.INVALID_UPDATE_PARAM),
            {"field": field},
        )


class NotFoundError(VerificationError):
    """No live record exists for the id."""

    def __init__(self, verification_id: int) -> None:
        super().__init__(
            f"Verification {verification_id} not found",
            ErrorKind.NOT_FOUND,
            ErrorCode.IDENTITY_NOT_FOUND,
            {"verification_id": verification_id},
        )


class AlreadyExistsError(VerificationError):
    """The identity already holds a live record."""

    def __init__(self, identity: str, verification_id: int) -> None:
        super().__init__(
            f"Identity {identity} already has verification {verification_id}",
            ErrorKind.ALREADY_EXISTS,
            ErrorCode.IDENTITY_ALREADY_VERIFIED,
            {"identity": identity, "verification_id": verification_id},
        )


class CapacityExceededError(VerificationError):
    """The registry has issued its maximum number of ids."""

    def __init__(self, max_verifications: int) -> None:
        super().__init__(
            f"Maximum of {max_verifications} verifications reached",
            ErrorKind.CAPACITY_EXCEEDED,
            ErrorCode.MAX_VERIFICATIONS_EXCEEDED,
            {"max_verifications": max_verifications},
        )


class ExpiredError(VerificationError):
    """The record's expiration height has passed."""

    def __init__(self, verification_id: int, expiration: int, block_height: int) -> None:
        super().__init__(
            f"Verification {verification_id} expired at height {expiration}",
            ErrorKind.EXPIRED,
            ErrorCode.VERIFICATION_EXPIRED,
            {
                "verification_id": verification_id,
                "expiration": expiration,
                "block_height": block_height,
            },
        )


class AttemptsExceededError(VerificationError):
    """The record's attempt budget is exhausted."""

    def __init__(self, verification_id: int, max_attempts: int) -> None:
        super().__init__(
            f"Verification {verification_id} used all {max_attempts} attempts",
            ErrorKind.ATTEMPTS_EXCEEDED,
            ErrorCode.ATTEMPTS_EXCEEDED,
            {"verification_id": verification_id, "max_attempts": max_attempts},
        )


class MismatchError(VerificationError):
    """Submitted hash or salt does not match the stored value."""

    def __init__(self, verification_id: int, field: str) -> None:
        if field not in ("hash", "salt"):
            raise ValueError(f"Mismatch field must be 'hash' or 'salt', got {field!r}")
        self.field = field
        super().__init__(
            f"Submitted {field} does not match verification {verification_id}",
            ErrorKind.MISMATCH,
            ErrorCode.HASH_MISMATCH if field == "hash" else ErrorCode.SALT_MISMATCH,
            {"verification_id": verification_id, "field": field},
        )


class ConfidenceTooLowError(VerificationError):
    """Submitted confidence is below the record's floor."""

    def __init__(self, verification_id: int, submitted: int, minimum: int) -> None:
        super().__init__(
            f"Confidence {submitted} is below minimum {minimum}",
            ErrorKind.CONFIDENCE_TOO_LOW,
            ErrorCode.CONFIDENCE_TOO_LOW,
            {
                "verification_id": verification_id,
                "submitted": submitted,
                "minimum": minimum,
            },
        )


class AuthorityNotConfiguredError(VerificationError):
    """No fee authority has been set."""

    def __init__(self) -> None:
        super().__init__(
            "Authority has not been configured",
            ErrorKind.AUTHORITY_NOT_CONFIGURED,
            ErrorCode.AUTHORITY_NOT_VERIFIED,
        )


class AuthorityAlreadyConfiguredError(VerificationError):
    """The fee authority is already set and cannot change."""

    def __init__(self, authority: str) -> None:
        super().__init__(
            f"Authority already configured as {authority}",
            ErrorKind.AUTHORITY_ALREADY_CONFIGURED,
            ErrorCode.AUTHORITY_ALREADY_SET,
            {"authority": authority},
        )


class TransferFailedError(VerificationError):
    """The creation fee could not be transferred."""

    def __init__(self, reason: str, amount: int, sender: str, recipient: str) -> None:
        super().__init__(
            f"Fee transfer failed: {reason}",
            ErrorKind.TRANSFER_FAILED,
            ErrorCode.TRANSFER_FAILED,
            {"amount": amount, "sender": sender, "recipient": recipient},
        )
