"""
Biometric Verification Registry
===============================

Authoritative store of biometric-verification claims.

Each identity holds at most one live claim. Claims are created for a
fee paid to the configured authority, verified, amended and
attempt-managed only by their verifier (the creating account), and
revoked by either the identity or the verifier.

Every operation runs inside a ledger transaction and commits registry
state last, so a rejected operation leaves the registry, balances and
event log unchanged.

Version: 0.1.0
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Protocol

from shared.ledger import LedgerClient, LedgerTransferError, get_ledger_client
from shared.logging import get_logger

from services.verification.audit import UpdateAuditTrail
from services.verification.authority import AuthorityGate
from services.verification.errors import (
    AlreadyExistsError,
    CapacityExceededError,
    ConfidenceTooLowError,
    ExpiredError,
    MismatchError,
    NotAuthorizedError,
    NotFoundError,
    TransferFailedError,
    VerificationError,
)
from services.verification.models import (
    BiometricType,
    VerificationRecord,
    VerificationUpdate,
)
from services.verification.validators import (
    validate_biometric_type,
    validate_confidence,
    validate_device_id,
    validate_expiration,
    validate_grace_period,
    validate_hash,
    validate_location,
    validate_max_attempts,
    validate_min_confidence,
    validate_salt,
)


logger = get_logger(__name__)


# Ledger event names
EVENT_INITIATED = "verification-initiated"
EVENT_PERFORMED = "verification-performed"
EVENT_UPDATED = "verification-updated"
EVENT_REVOKED = "verification-revoked"


class VerifierPolicy(Protocol):
    """Decides which accounts may open verification claims."""

    def is_verified_authority(self, principal: str) -> bool:
        ...


class VerificationRegistry:
    """
    Registry of biometric-verification claims.

    Features:
    - Single live claim per identity, enforced by an identity index
    - Fee collection for the configured authority on every claim
    - Shared, bounded attempt counter per claim
    - Latest-amendment audit trail
    """

    def __init__(
        self,
        ledger: LedgerClient | None = None,
        gate: AuthorityGate | None = None,
        trail: UpdateAuditTrail | None = None,
        verifier_policy: VerifierPolicy | None = None,
    ) -> None:
        self.ledger = ledger or get_ledger_client()
        self.gate = gate or AuthorityGate()
        self.trail = trail or UpdateAuditTrail()
        self.verifier_policy = verifier_policy

        self._verifications: dict[int, VerificationRecord] = {}
        self._by_identity: dict[str, int] = {}
        self._next_id = 0

    # =========================================================================
    # Configuration
    # =========================================================================

    def set_authority(self, caller: str, account: str) -> None:
        with self._rejections("authority_set", caller=caller, account=account):
            self.gate.set_authority(caller, account)

    def set_max_verifications(self, caller: str, value: int) -> None:
        with self._rejections("max_verifications_set", caller=caller, value=value):
            self.gate.set_max_verifications(caller, value)

    def set_verification_fee(self, caller: str, value: int) -> None:
        with self._rejections("verification_fee_set", caller=caller, value=value):
            self.gate.set_verification_fee(caller, value)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def initiate_verification(
        self,
        caller: str,
        identity: str,
        credential_hash: str,
        salt: int,
        expiration: int,
        biometric_type: BiometricType | str,
        confidence_score: int,
        grace_period: int,
        location: str,
        device_id: str,
        min_confidence: int,
        max_attempts: int,
    ) -> int:
        """
        Open a verification claim for ``identity``.

        Args:
            caller: Paying account; becomes the claim's verifier
            identity: Account the claim is about
            credential_hash: 64-character digest of biometric material
            salt: Positive nonce mixed into the hash
            expiration: Block height after which the claim cannot be verified
            biometric_type: fingerprint, facial or iris
            confidence_score: Claimed score, 0-100
            grace_period: Stored for consumers, at most 30
            location: Capture location, at most 100 characters
            device_id: Capture device, at most 64 characters
            min_confidence: Floor a submitted score must meet, 0-100
            max_attempts: Attempt budget, positive

        Returns:
            The new verification id.

        Raises:
            CapacityExceededError: If the id ceiling has been reached.
            ValidationFailedError: On the first invalid field.
            NotAuthorizedError: If a verifier policy rejects the caller.
            AlreadyExistsError: If the identity already holds a live claim.
            AuthorityNotConfiguredError: If no authority is configured.
            TransferFailedError: If the fee cannot be paid.
        """
        with self._rejections("verification_initiate", caller=caller, identity=identity):
            if self._next_id >= self.gate.max_verifications:
                raise CapacityExceededError(self.gate.max_verifications)

            height = self.ledger.block_height
            validate_hash(credential_hash)
            validate_salt(salt)
            validate_expiration(expiration, height)
            validate_biometric_type(biometric_type)
            validate_confidence(confidence_score)
            validate_grace_period(grace_period)
            validate_location(location)
            validate_device_id(device_id)
            validate_min_confidence(min_confidence)
            validate_max_attempts(max_attempts)

            if self.verifier_policy is not None and not self.verifier_policy.is_verified_authority(caller):
                raise NotAuthorizedError(caller, "initiate verification")

            if identity in self._by_identity:
                raise AlreadyExistsError(identity, self._by_identity[identity])

            authority = self.gate.require_authority()

            verification_id = self._next_id
            record = VerificationRecord(
                verification_id=verification_id,
                identity=identity,
                credential_hash=credential_hash,
                salt=salt,
                expiration=expiration,
                created_at=height,
                last_updated_at=height,
                verifier=caller,
                biometric_type=BiometricType(biometric_type),
                confidence_score=confidence_score,
                grace_period=grace_period,
                location=location,
                device_id=device_id,
                min_confidence=min_confidence,
                max_attempts=max_attempts,
            )

            with self.ledger.transaction():
                self._collect_fee(caller, authority)
                self.ledger.emit_event(EVENT_INITIATED, {
                    "verification_id": verification_id,
                    "identity": identity,
                    "verifier": caller,
                    "biometric_type": record.biometric_type.value,
                    "expiration": expiration,
                })

                self._verifications[verification_id] = record
                self._by_identity[identity] = verification_id
                self._next_id += 1

        logger.info(
            "verification_initiated",
            verification_id=verification_id,
            identity=identity,
            verifier=caller,
            fee=self.gate.verification_fee,
        )
        return verification_id

    def perform_verification(
        self,
        caller: str,
        verification_id: int,
        submitted_hash: str,
        submitted_salt: int,
        submitted_confidence: int,
    ) -> VerificationRecord:
        """
        Report a successful biometric match against a claim.

        A successful call consumes one attempt, marks the claim verified
        and records the submitted confidence.

        Returns:
            Copy of the updated record.

        Raises:
            NotFoundError, NotAuthorizedError, ExpiredError,
            AttemptsExceededError, ValidationFailedError, MismatchError,
            ConfidenceTooLowError
        """
        with self._rejections("verification_perform", caller=caller, verification_id=verification_id):
            record = self._require_verifier(caller, verification_id, "perform verification")

            height = self.ledger.block_height
            if record.is_expired(height):
                raise ExpiredError(verification_id, record.expiration, height)
            record.ensure_attempt_available()

            validate_hash(submitted_hash)
            validate_salt(submitted_salt)
            validate_confidence(submitted_confidence)

            if submitted_hash != record.credential_hash:
                raise MismatchError(verification_id, "hash")
            if submitted_salt != record.salt:
                raise MismatchError(verification_id, "salt")
            if submitted_confidence < record.min_confidence:
                raise ConfidenceTooLowError(
                    verification_id, submitted_confidence, record.min_confidence
                )

            updated = record.copy()
            updated.consume_attempt()
            updated.status = True
            updated.confidence_score = submitted_confidence
            updated.last_updated_at = height

            with self.ledger.transaction():
                self.ledger.emit_event(EVENT_PERFORMED, {
                    "verification_id": verification_id,
                    "confidence_score": submitted_confidence,
                    "attempts": updated.attempts,
                })
                self._verifications[verification_id] = updated

        logger.info(
            "verification_performed",
            verification_id=verification_id,
            confidence_score=submitted_confidence,
            attempts=updated.attempts,
        )
        return updated.copy()

    def update_verification(
        self,
        caller: str,
        verification_id: int,
        new_hash: str,
        new_salt: int,
        new_expiration: int,
    ) -> VerificationUpdate:
        """
        Amend a claim's credential material.

        Status and attempts are untouched. The amendment replaces any
        earlier audit entry for the id.

        Returns:
            The recorded audit entry.
        """
        with self._rejections("verification_update", caller=caller, verification_id=verification_id):
            record = self._require_verifier(caller, verification_id, "update verification")

            height = self.ledger.block_height
            validate_hash(new_hash)
            validate_salt(new_salt)
            validate_expiration(new_expiration, height)

            updated = record.copy()
            updated.credential_hash = new_hash
            updated.salt = new_salt
            updated.expiration = new_expiration
            updated.last_updated_at = height

            entry = VerificationUpdate(
                verification_id=verification_id,
                new_hash=new_hash,
                new_salt=new_salt,
                new_expiration=new_expiration,
                updated_at=height,
                updater=caller,
            )

            with self.ledger.transaction():
                self.ledger.emit_event(EVENT_UPDATED, {
                    "verification_id": verification_id,
                    "expiration": new_expiration,
                    "updater": caller,
                })
                self._verifications[verification_id] = updated
                self.trail.record(entry)

        logger.info(
            "verification_updated",
            verification_id=verification_id,
            expiration=new_expiration,
            updater=caller,
        )
        return entry

    def revoke_verification(self, caller: str, verification_id: int) -> None:
        """
        Delete a claim, its identity index entry and its audit entry.

        Allowed for the claim's identity or its verifier. The id is never
        reissued.
        """
        with self._rejections("verification_revoke", caller=caller, verification_id=verification_id):
            record = self._require_record(verification_id)
            if caller not in (record.identity, record.verifier):
                raise NotAuthorizedError(caller, "revoke verification")

            with self.ledger.transaction():
                self.ledger.emit_event(EVENT_REVOKED, {
                    "verification_id": verification_id,
                    "identity": record.identity,
                    "revoked_by": caller,
                })
                del self._verifications[verification_id]
                del self._by_identity[record.identity]
                self.trail.discard(verification_id)

        logger.info(
            "verification_revoked",
            verification_id=verification_id,
            identity=record.identity,
            revoked_by=caller,
        )

    def increment_attempt(self, caller: str, verification_id: int) -> int:
        """Consume one attempt without a match; returns the new count."""
        with self._rejections("verification_attempt_increment", caller=caller, verification_id=verification_id):
            record = self._require_verifier(caller, verification_id, "increment attempt")

            updated = record.copy()
            attempts = updated.consume_attempt()
            updated.last_updated_at = self.ledger.block_height
            self._verifications[verification_id] = updated

        logger.info(
            "verification_attempt_incremented",
            verification_id=verification_id,
            attempts=attempts,
            attempts_remaining=updated.attempts_remaining,
        )
        return attempts

    def reset_attempts(self, caller: str, verification_id: int) -> None:
        """Restore the full attempt budget."""
        with self._rejections("verification_attempts_reset", caller=caller, verification_id=verification_id):
            record = self._require_verifier(caller, verification_id, "reset attempts")

            updated = record.copy()
            updated.reset_attempts()
            updated.last_updated_at = self.ledger.block_height
            self._verifications[verification_id] = updated

        logger.info("verification_attempts_reset", verification_id=verification_id)

    # =========================================================================
    # Queries
    # =========================================================================

    def get_verification(self, verification_id: int) -> VerificationRecord | None:
        record = self._verifications.get(verification_id)
        return record.copy() if record is not None else None

    def get_verification_update(self, verification_id: int) -> VerificationUpdate | None:
        return self.trail.get(verification_id)

    def get_verification_id(self, identity: str) -> int | None:
        return self._by_identity.get(identity)

    def is_user_verified(self, identity: str) -> bool:
        """
        Whether the identity holds a live claim.

        This is a presence check: a claim that was opened but never
        successfully performed also counts.
        """
        return identity in self._by_identity

    def get_verification_count(self) -> int:
        """Number of ids ever issued; revocation does not lower it."""
        return self._next_id

    # =========================================================================
    # Internals
    # =========================================================================

    def _require_record(self, verification_id: int) -> VerificationRecord:
        record = self._verifications.get(verification_id)
        if record is None:
            raise NotFoundError(verification_id)
        return record

    def _require_verifier(
        self,
        caller: str,
        verification_id: int,
        operation: str,
    ) -> VerificationRecord:
        record = self._require_record(verification_id)
        if caller != record.verifier:
            raise NotAuthorizedError(caller, operation)
        return record

    def _collect_fee(self, caller: str, authority: str) -> None:
        fee = self.gate.verification_fee
        try:
            self.ledger.transfer(fee, caller, authority)
        except LedgerTransferError as exc:
            raise TransferFailedError(exc.reason, fee, caller, authority) from exc

    @contextmanager
    def _rejections(self, operation: str, **context: Any) -> Iterator[None]:
        try:
            yield
        except VerificationError as exc:
            logger.warning(
                f"{operation}_rejected",
                **context,
                kind=exc.kind.value,
                error_code=int(exc.code),
                reason=exc.message,
            )
            raise
