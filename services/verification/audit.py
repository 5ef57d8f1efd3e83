"""
Update Audit Trail
==================

Side store of the latest credential amendment per verification id.

Entries are overwritten, never appended: only the most recent
amendment of a record survives.

Version: 0.1.0
"""

from services.verification.models import VerificationUpdate


class UpdateAuditTrail:
    """Verification id -> latest VerificationUpdate."""

    def __init__(self) -> None:
        self._entries: dict[int, VerificationUpdate] = {}

    def record(self, entry: VerificationUpdate) -> None:
        self._entries[entry.verification_id] = entry

    def get(self, verification_id: int) -> VerificationUpdate | None:
        return self._entries.get(verification_id)

    def discard(self, verification_id: int) -> None:
        self._entries.pop(verification_id, None)

    def __contains__(self, verification_id: object) -> bool:
        return verification_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)
