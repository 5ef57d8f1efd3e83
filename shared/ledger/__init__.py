"""
Ledger Module
=============

Abstraction layer for the ledger the verification registry runs on.

Supports:
- Mock (development/testing)
- Testnet
- Mainnet

Features:
- Block-height clock
- Native value transfer
- Append-only event log
- All-or-nothing transaction scopes

Usage:
    from shared.ledger import get_ledger_client

    ledger = get_ledger_client()

    with ledger.transaction():
        ledger.transfer(500, "ST1TEST", "ST2TEST")
        ledger.emit_event("verification-initiated", {"id": 0})
"""

from shared.ledger.client import (
    LedgerClient,
    LedgerError,
    LedgerEvent,
    LedgerTransferError,
    Transfer,
    get_ledger_client,
    reset_ledger_client,
    set_ledger_client,
)
from shared.ledger.mock import MockLedgerClient

__all__ = [
    # Client
    "LedgerClient",
    "get_ledger_client",
    "set_ledger_client",
    "reset_ledger_client",
    # Models
    "LedgerEvent",
    "Transfer",
    # Errors
    "LedgerError",
    "LedgerTransferError",
    # Implementations
    "MockLedgerClient",
]
