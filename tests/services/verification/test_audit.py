"""Tests for the update audit trail."""

from services.verification.audit import UpdateAuditTrail
from services.verification.models import VerificationUpdate


def _entry(verification_id: int, salt: int) -> VerificationUpdate:
    return VerificationUpdate(
        verification_id=verification_id,
        new_hash="c" * 64,
        new_salt=salt,
        new_expiration=2000,
        updated_at=10,
        updater="ST1TEST",
    )


class TestUpdateAuditTrail:
    def test_record_overwrites(self) -> None:
        trail = UpdateAuditTrail()
        trail.record(_entry(0, 1))
        trail.record(_entry(0, 2))

        assert len(trail) == 1
        assert trail.get(0).new_salt == 2

    def test_discard(self) -> None:
        trail = UpdateAuditTrail()
        trail.record(_entry(3, 1))

        trail.discard(3)
        trail.discard(99)

        assert 3 not in trail
        assert trail.get(3) is None
