"""
BIOVERIFY Test Suite
====================

Test organization:
- tests/unit/                   - Shared library (config, logging, ledger)
- tests/services/verification/  - Verification registry

Run tests:
    pytest                          # All tests
    pytest tests/unit               # Shared library only
"""
