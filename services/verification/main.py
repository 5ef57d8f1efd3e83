"""
Verification Service - Composition Root
=======================================

Builds a registry wired to the configured ledger and settings.

Version: 0.1.0
"""

from shared.config import settings
from shared.ledger import LedgerClient, get_ledger_client
from shared.logging import get_logger, setup_logging

from services.verification.authority import AuthorityGate
from services.verification.registry import VerificationRegistry, VerifierPolicy


logger = get_logger(__name__)


def create_registry(
    ledger: LedgerClient | None = None,
    verifier_policy: VerifierPolicy | None = None,
    configure_logging: bool = True,
) -> VerificationRegistry:
    """
    Create a verification registry from settings.

    Args:
        ledger: Ledger to run on (defaults to the configured client)
        verifier_policy: Optional allow-list of accounts that may open claims
        configure_logging: Whether to set up structlog from settings

    Returns:
        A fresh VerificationRegistry with an unconfigured authority.
    """
    if configure_logging:
        setup_logging(
            log_level=settings.log_level.value,
            json_logs=settings.json_logs or settings.is_production,
            service_name=settings.service_name,
        )

    ledger = ledger or get_ledger_client()
    gate = AuthorityGate(
        null_principal=settings.ledger.null_principal,
        max_verifications=settings.registry.max_verifications,
        verification_fee=settings.registry.verification_fee,
        restrict_to_authority=settings.registry.restrict_config_to_authority,
    )
    registry = VerificationRegistry(ledger=ledger, gate=gate, verifier_policy=verifier_policy)

    logger.info(
        "verification_registry_created",
        environment=settings.environment.value,
        ledger_mode=ledger.mode.value,
        max_verifications=gate.max_verifications,
        verification_fee=gate.verification_fee,
        restrict_config_to_authority=gate.restrict_to_authority,
    )
    return registry
