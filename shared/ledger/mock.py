"""
Mock Ledger Client
==================

In-memory mock implementation for development and testing.

Version: 0.1.0
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from shared.config import LedgerMode
from shared.ledger.client import (
    LedgerClient,
    LedgerEvent,
    LedgerTransferError,
    Transfer,
)
from shared.logging import get_logger

logger = get_logger(__name__)


class MockLedgerClient(LedgerClient):
    """
    In-memory mock ledger client.

    Simulates block height, balances, transfers and the event log
    without requiring actual ledger infrastructure.

    Accounts that have never been funded start at ``default_balance``.
    Data is stored in memory and lost on restart.
    """

    def __init__(self, genesis_height: int = 0, default_balance: int = 1_000_000) -> None:
        """Initialize mock client with in-memory storage."""
        self._genesis_height = genesis_height
        self._block_height = genesis_height
        self._default_balance = default_balance

        # In-memory storage
        self._balances: dict[str, int] = {}
        self._transfers: list[Transfer] = []
        self._events: list[LedgerEvent] = []

        self._pending_failure: str | None = None

        logger.debug("mock_ledger_initialized", block_height=genesis_height)

    @property
    def mode(self) -> LedgerMode:
        return LedgerMode.MOCK

    @property
    def block_height(self) -> int:
        return self._block_height

    def health_check(self) -> dict[str, Any]:
        """Check mock ledger health."""
        return {
            "status": "healthy",
            "mode": self.mode.value,
            "block_height": self._block_height,
            "transfers": len(self._transfers),
            "events": len(self._events),
        }

    # =========================================================================
    # Value Transfer
    # =========================================================================

    def balance_of(self, account: str) -> int:
        return self._balances.get(account, self._default_balance)

    def transfer(self, amount: int, sender: str, recipient: str) -> Transfer:
        """Transfer value, failing without side effects on any violation."""
        reason = self._transfer_violation(amount, sender, recipient)
        if reason is not None:
            logger.warning(
                "mock_transfer_failed",
                amount=amount,
                sender=sender,
                recipient=recipient,
                reason=reason,
            )
            raise LedgerTransferError(reason, amount, sender, recipient)

        self._balances[sender] = self.balance_of(sender) - amount
        self._balances[recipient] = self.balance_of(recipient) + amount

        record = Transfer(
            amount=amount,
            sender=sender,
            recipient=recipient,
            block_height=self._block_height,
        )
        self._transfers.append(record)

        logger.debug(
            "mock_transfer_completed",
            amount=amount,
            sender=sender,
            recipient=recipient,
        )
        return record

    def _transfer_violation(self, amount: int, sender: str, recipient: str) -> str | None:
        if self._pending_failure is not None:
            reason, self._pending_failure = self._pending_failure, None
            return reason
        if amount < 0:
            return "negative amount"
        if not recipient:
            return "invalid recipient"
        if sender == recipient:
            return "sender is recipient"
        if self.balance_of(sender) < amount:
            return "insufficient balance"
        return None

    # =========================================================================
    # Events
    # =========================================================================

    def emit_event(self, name: str, payload: dict[str, Any]) -> LedgerEvent:
        event = LedgerEvent(
            sequence=len(self._events),
            name=name,
            payload=dict(payload),
            block_height=self._block_height,
        )
        self._events.append(event)
        logger.debug("mock_event_emitted", event_name=name, sequence=event.sequence)
        return event

    # =========================================================================
    # Atomicity
    # =========================================================================

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Snapshot balances, transfers and events; restore them on error."""
        balances = dict(self._balances)
        transfer_count = len(self._transfers)
        event_count = len(self._events)
        try:
            yield
        except BaseException:
            self._balances = balances
            del self._transfers[transfer_count:]
            del self._events[event_count:]
            logger.debug("mock_transaction_rolled_back")
            raise

    # =========================================================================
    # Test Utilities
    # =========================================================================

    @property
    def transfers(self) -> list[Transfer]:
        """Completed transfers, oldest first."""
        return list(self._transfers)

    @property
    def events(self) -> list[LedgerEvent]:
        """Recorded events, oldest first."""
        return list(self._events)

    def advance(self, blocks: int = 1) -> int:
        """Mine ``blocks`` empty blocks and return the new height."""
        if blocks < 0:
            raise ValueError("Block height cannot move backwards")
        self._block_height += blocks
        return self._block_height

    def set_block_height(self, height: int) -> None:
        """Jump to an absolute height (never backwards)."""
        if height < self._block_height:
            raise ValueError(
                f"Block height cannot move backwards: {height} < {self._block_height}"
            )
        self._block_height = height

    def fund(self, account: str, amount: int) -> None:
        """Set the balance of an account."""
        self._balances[account] = amount

    def fail_next_transfer(self, reason: str = "simulated failure") -> None:
        """Make the next transfer fail with ``reason``."""
        self._pending_failure = reason

    def clear_all(self) -> None:
        """Clear all mock data (for testing)."""
        self._balances.clear()
        self._transfers.clear()
        self._events.clear()
        self._pending_failure = None
        self._block_height = self._genesis_height
        logger.debug("mock_ledger_cleared")

    def get_stats(self) -> dict[str, int]:
        """Get storage statistics."""
        return {
            "accounts": len(self._balances),
            "transfers": len(self._transfers),
            "events": len(self._events),
            "block_height": self._block_height,
        }
