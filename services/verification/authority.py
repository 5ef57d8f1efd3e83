"""
Authority Gate
==============

Registry configuration: the one-shot fee authority, the creation fee
and the ceiling on issued verification ids.

The authority can be set exactly once and never changed afterwards.
The fee and ceiling can be changed only after an authority exists. By
default any caller may change them; ``restrict_to_authority`` limits
that to the authority itself.

Version: 0.1.0
"""

from shared.config import settings
from shared.logging import get_logger

from services.verification.errors import (
    AuthorityAlreadyConfiguredError,
    AuthorityNotConfiguredError,
    NotAuthorizedError,
)
from services.verification.validators import validate_non_negative, validate_principal


logger = get_logger(__name__)


class AuthorityGate:
    """Configuration object guarding claim creation."""

    def __init__(
        self,
        null_principal: str | None = None,
        max_verifications: int | None = None,
        verification_fee: int | None = None,
        restrict_to_authority: bool | None = None,
    ) -> None:
        self.null_principal = (
            null_principal if null_principal is not None else settings.ledger.null_principal
        )
        self._max_verifications = (
            max_verifications
            if max_verifications is not None
            else settings.registry.max_verifications
        )
        self._verification_fee = (
            verification_fee
            if verification_fee is not None
            else settings.registry.verification_fee
        )
        self.restrict_to_authority = (
            restrict_to_authority
            if restrict_to_authority is not None
            else settings.registry.restrict_config_to_authority
        )
        validate_non_negative(self._max_verifications, "max_verifications")
        validate_non_negative(self._verification_fee, "verification_fee")

        self._authority: str | None = None

    @property
    def authority(self) -> str | None:
        return self._authority

    @property
    def is_configured(self) -> bool:
        return self._authority is not None

    @property
    def max_verifications(self) -> int:
        return self._max_verifications

    @property
    def verification_fee(self) -> int:
        return self._verification_fee

    def require_authority(self) -> str:
        """Return the authority or raise if none is configured."""
        if self._authority is None:
            raise AuthorityNotConfiguredError()
        return self._authority

    def set_authority(self, caller: str, account: str) -> None:
        """
        Configure the fee authority.

        Args:
            caller: Invoking account (any caller may configure it once)
            account: Account that will receive creation fees

        Raises:
            ValidationFailedError: If ``account`` is the burn address.
            AuthorityAlreadyConfiguredError: If an authority already exists.
        """
        validate_principal(account, self.null_principal)
        if self._authority is not None:
            raise AuthorityAlreadyConfiguredError(self._authority)

        self._authority = account
        logger.info("authority_configured", authority=account, caller=caller)

    def set_max_verifications(self, caller: str, value: int) -> None:
        """Change the ceiling on issued verification ids."""
        self._require_config_access(caller, "set max verifications")
        validate_non_negative(value, "max_verifications")

        self._max_verifications = value
        logger.info("max_verifications_set", max_verifications=value, caller=caller)

    def set_verification_fee(self, caller: str, value: int) -> None:
        """Change the fee transferred on each claim creation."""
        self._require_config_access(caller, "set verification fee")
        validate_non_negative(value, "verification_fee")

        self._verification_fee = value
        logger.info("verification_fee_set", verification_fee=value, caller=caller)

    def _require_config_access(self, caller: str, operation: str) -> None:
        authority = self.require_authority()
        if self.restrict_to_authority and caller != authority:
            raise NotAuthorizedError(caller, operation)
