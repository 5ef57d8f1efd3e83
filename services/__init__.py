"""
BIOVERIFY Services
==================

Services built on the shared library.

Services:
- verification: Biometric-verification claim registry
"""

__all__ = [
    "verification",
]
