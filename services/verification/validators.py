"""
Field Validators
================

Stateless format and range checks for every user-supplied field.

Each ``validate_*`` function returns ``None`` when the value is
acceptable and raises ``ValidationFailedError`` naming the field
otherwise.

Version: 0.1.0
"""

from collections.abc import Callable
from typing import Any

from services.verification.errors import ValidationFailedError
from services.verification.models import BiometricType


HASH_LENGTH = 64
MAX_CONFIDENCE = 100
MAX_GRACE_PERIOD = 30
MAX_LOCATION_LENGTH = 100
MAX_DEVICE_ID_LENGTH = 64


def _require_int(value: Any, field: str) -> int:
    # bool is an int subclass; never a meaningful count or score
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationFailedError(field, f"expected integer, got {type(value).__name__}")
    return value


def _require_str(value: Any, field: str) -> str:
    if not isinstance(value, str):
        raise ValidationFailedError(field, f"expected string, got {type(value).__name__}")
    return value


def validate_hash(value: Any, field: str = "credential_hash") -> None:
    """Credential hash must be exactly 64 characters."""
    if len(_require_str(value, field)) != HASH_LENGTH:
        raise ValidationFailedError(field, f"length must be {HASH_LENGTH}")


def validate_salt(value: Any) -> None:
    """Salt must be a positive integer."""
    if _require_int(value, "salt") <= 0:
        raise ValidationFailedError("salt", "must be positive")


def validate_expiration(value: Any, block_height: int) -> None:
    """Expiration must lie strictly after the current block height."""
    if _require_int(value, "expiration") <= block_height:
        raise ValidationFailedError(
            "expiration", f"must be greater than current height {block_height}"
        )


def validate_biometric_type(value: Any) -> None:
    """Biometric type must be fingerprint, facial or iris."""
    if isinstance(value, BiometricType):
        return
    if _require_str(value, "biometric_type") not in BiometricType.values():
        raise ValidationFailedError(
            "biometric_type", f"must be one of {sorted(BiometricType.values())}"
        )


def validate_confidence(value: Any, field: str = "confidence_score") -> None:
    """Confidence must be within [0, 100]."""
    if not 0 <= _require_int(value, field) <= MAX_CONFIDENCE:
        raise ValidationFailedError(field, f"must be between 0 and {MAX_CONFIDENCE}")


def validate_min_confidence(value: Any) -> None:
    validate_confidence(value, field="min_confidence")


def validate_grace_period(value: Any) -> None:
    """Grace period is an unsigned count of at most 30."""
    if not 0 <= _require_int(value, "grace_period") <= MAX_GRACE_PERIOD:
        raise ValidationFailedError("grace_period", f"must be at most {MAX_GRACE_PERIOD}")


def validate_location(value: Any) -> None:
    if len(_require_str(value, "location")) > MAX_LOCATION_LENGTH:
        raise ValidationFailedError(
            "location", f"must be at most {MAX_LOCATION_LENGTH} characters"
        )


def validate_device_id(value: Any) -> None:
    if len(_require_str(value, "device_id")) > MAX_DEVICE_ID_LENGTH:
        raise ValidationFailedError(
            "device_id", f"must be at most {MAX_DEVICE_ID_LENGTH} characters"
        )


def validate_max_attempts(value: Any) -> None:
    if _require_int(value, "max_attempts") <= 0:
        raise ValidationFailedError("max_attempts", "must be positive")


def validate_principal(value: Any, null_principal: str) -> None:
    """Reject empty principals and the burn address."""
    account = _require_str(value, "principal")
    if not account:
        raise ValidationFailedError("principal", "must not be empty")
    if account == null_principal:
        raise ValidationFailedError("principal", "burn address is not allowed")


def validate_non_negative(value: Any, field: str) -> None:
    if _require_int(value, field) < 0:
        raise ValidationFailedError(field, "must not be negative")


def is_valid(validator: Callable[..., None], *args: Any, **kwargs: Any) -> bool:
    """
    Predicate form of a validator.

    Example:
        is_valid(validate_salt, 12345)  # True
        is_valid(validate_hash, "short")  # False
    """
    try:
        validator(*args, **kwargs)
    except ValidationFailedError:
        return False
    return True
