"""
Ledger Client Interface
=======================

Abstract base class and models for the ledger the registry runs on.

The ledger supplies the monotonic block-height clock, native value
transfer, an append-only event sink and per-operation atomicity.

Version: 0.1.0
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, Field

from shared.config import settings, LedgerMode
from shared.logging import get_logger

logger = get_logger(__name__)


class LedgerError(Exception):
    """Base class for ledger-level failures."""


class LedgerTransferError(LedgerError):
    """Raised when a value transfer cannot complete."""

    def __init__(
        self,
        reason: str,
        amount: int,
        sender: str,
        recipient: str,
    ) -> None:
        self.reason = reason
        self.amount = amount
        self.sender = sender
        self.recipient = recipient
        super().__init__(
            f"Transfer of {amount} from {sender} to {recipient} failed: {reason}"
        )


class Transfer(BaseModel):
    """A completed value transfer."""

    amount: int = Field(..., ge=0)
    sender: str
    recipient: str
    block_height: int


class LedgerEvent(BaseModel):
    """Notification written to the ledger event sink."""

    sequence: int = Field(..., description="Position in the global event log")
    name: str
    payload: dict[str, Any] = Field(default_factory=dict)
    block_height: int
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))


class LedgerClient(ABC):
    """
    Abstract base class for ledger clients.

    Implements the Strategy pattern for different ledger modes.
    """

    @property
    @abstractmethod
    def mode(self) -> LedgerMode:
        """Get the ledger mode."""
        ...

    @property
    @abstractmethod
    def block_height(self) -> int:
        """Current value of the monotonic block-height counter."""
        ...

    @abstractmethod
    def health_check(self) -> dict[str, Any]:
        """Check ledger health."""
        ...

    # =========================================================================
    # Value Transfer
    # =========================================================================

    @abstractmethod
    def balance_of(self, account: str) -> int:
        """
        Get the native balance of an account.

        Args:
            account: Account principal

        Returns:
            Balance in the ledger's smallest unit
        """
        ...

    @abstractmethod
    def transfer(self, amount: int, sender: str, recipient: str) -> Transfer:
        """
        Move native value between accounts.

        Args:
            amount: Amount to move
            sender: Paying account
            recipient: Receiving account

        Returns:
            The completed Transfer

        Raises:
            LedgerTransferError: If the transfer cannot complete; no
                balance is changed in that case.
        """
        ...

    # =========================================================================
    # Events
    # =========================================================================

    @abstractmethod
    def emit_event(self, name: str, payload: dict[str, Any]) -> LedgerEvent:
        """
        Append an event to the ledger event log.

        Args:
            name: Event name
            payload: Event data

        Returns:
            The recorded LedgerEvent
        """
        ...

    # =========================================================================
    # Atomicity
    # =========================================================================

    @abstractmethod
    def transaction(self) -> AbstractContextManager[None]:
        """
        Open an all-or-nothing scope.

        Transfers and events made inside the scope are discarded if the
        scope exits with an exception.
        """
        ...


# Global client instance
_client: LedgerClient | None = None


def get_ledger_client() -> LedgerClient:
    """
    Get the configured ledger client instance.

    Returns:
        LedgerClient instance based on settings
    """
    global _client

    if _client is None:
        mode = settings.ledger.mode

        if mode == LedgerMode.MOCK:
            from shared.ledger.mock import MockLedgerClient

            _client = MockLedgerClient(
                genesis_height=settings.ledger.genesis_height,
                default_balance=settings.ledger.default_balance,
            )
        elif mode in (LedgerMode.TESTNET, LedgerMode.MAINNET):
            raise NotImplementedError(
                f"Ledger mode '{mode.value}' not yet implemented. "
                "Use LEDGER_MODE=mock for development."
            )
        else:
            raise ValueError(f"Unknown ledger mode: {mode}")

        logger.info(
            "ledger_client_initialized",
            mode=mode.value,
        )

    return _client


def set_ledger_client(client: LedgerClient) -> None:
    """
    Set a custom ledger client.

    Args:
        client: LedgerClient instance
    """
    global _client
    _client = client
    logger.info(
        "ledger_client_set",
        mode=client.mode.value,
    )


def reset_ledger_client() -> None:
    """Reset the client to be re-initialized."""
    global _client
    _client = None
