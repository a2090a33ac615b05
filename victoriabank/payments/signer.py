"""P_SIGN service for gateway requests and responses."""

import logging
from collections.abc import Mapping
from functools import cached_property

from cryptography.hazmat.primitives.asymmetric import rsa

from victoriabank.core.config import Settings, get_settings
from victoriabank.core.exceptions import GatewayResponseError
from victoriabank.payments.keys import load_private_key, load_public_key
from victoriabank.payments.mac import GATEWAY_PSIGN_FIELDS, MERCHANT_PSIGN_FIELDS, build_mac
from victoriabank.payments.profiles import get_signature_profile
from victoriabank.payments.schemas import GatewayAction, MacPolicy, SignatureAlgo
from victoriabank.payments.signature import sign, verify

logger = logging.getLogger(__name__)

_ACTION_ERRORS = {
    GatewayAction.DUPLICATE: "Bank response: Duplicate transaction detected",
    GatewayAction.DECLINED: "Bank response: Transaction declined",
    GatewayAction.FAULT: "Bank response: Transaction processing fault",
}


class PSignService:
    """Signs merchant requests and verifies gateway responses.

    Configuration is fixed at construction. Keys are parsed on first use and
    kept as immutable handles, so one instance can be shared between threads.
    """

    def __init__(
        self,
        merchant_private_key: str | bytes | None = None,
        bank_public_key: str | bytes | None = None,
        *,
        merchant_private_key_passphrase: str | None = None,
        signature_algo: SignatureAlgo | str = SignatureAlgo.SHA256,
        inbound_mac_policy: MacPolicy | str = MacPolicy.STRICT,
    ) -> None:
        # Fails fast on unknown selector
        self.profile = get_signature_profile(signature_algo)
        self.signature_algo = self.profile.algo
        self.inbound_mac_policy = MacPolicy(inbound_mac_policy)

        self._merchant_private_key_pem = merchant_private_key or ""
        self._merchant_private_key_passphrase = merchant_private_key_passphrase
        self._bank_public_key_pem = bank_public_key or ""

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "PSignService":
        """Build service from application settings."""
        if settings is None:
            settings = get_settings()

        return cls(
            merchant_private_key=settings.read_merchant_private_key(),
            bank_public_key=settings.read_bank_public_key(),
            merchant_private_key_passphrase=settings.merchant_private_key_passphrase,
            signature_algo=settings.signature_algo,
            inbound_mac_policy=settings.inbound_mac_policy,
        )

    @cached_property
    def merchant_private_key(self) -> rsa.RSAPrivateKey:
        return load_private_key(self._merchant_private_key_pem, self._merchant_private_key_passphrase)

    @cached_property
    def bank_public_key(self) -> rsa.RSAPublicKey:
        return load_public_key(self._bank_public_key_pem)

    def sign_mac(self, mac: bytes) -> str:
        """Sign MAC bytes, returns uppercase hex."""
        return sign(mac, self.merchant_private_key, self.signature_algo)

    def verify_mac(self, mac: bytes, signature_hex: str) -> bool:
        return verify(mac, signature_hex, self.bank_public_key, self.signature_algo)

    def generate_signature(self, params: Mapping[str, str]) -> str:
        """Generate P_SIGN for request parameters.

        MAC fields: ORDER, NONCE, TIMESTAMP, TRTYPE, AMOUNT (all required).

        Raises:
            MissingSignatureFieldError: If a MAC field is empty
            InvalidKeyMaterialError: If merchant private key cannot be loaded
            SignatureGenerationFailedError: If signing fails
        """
        mac = build_mac(params, MERCHANT_PSIGN_FIELDS, MacPolicy.STRICT)
        return self.sign_mac(mac)

    def verify_signature(self, params: Mapping[str, str]) -> bool:
        """Verify P_SIGN of gateway response parameters.

        MAC fields: ACTION, RC, RRN, ORDER, AMOUNT. Empty fields are handled
        according to inbound_mac_policy.

        Returns:
            True if P_SIGN is valid

        Raises:
            MissingSignatureFieldError: If a MAC field is empty under strict policy
            InvalidKeyMaterialError: If bank public key cannot be loaded
        """
        signature_hex = params.get("P_SIGN")
        if not signature_hex:
            logger.warning("Gateway response without P_SIGN: order=%s", params.get("ORDER"))
            return False

        mac = build_mac(params, GATEWAY_PSIGN_FIELDS, self.inbound_mac_policy)
        is_valid = self.verify_mac(mac, signature_hex)

        if not is_valid:
            logger.warning(
                "Invalid P_SIGN: order=%s, action=%s, algo=%s",
                params.get("ORDER"),
                params.get("ACTION"),
                self.signature_algo.value,
            )

        return is_valid

    def validate_response(self, params: Mapping[str, str]) -> bool:
        """Validate gateway response status and signature.

        Returns:
            P_SIGN validity for successful responses

        Raises:
            GatewayResponseError: If ACTION is missing or not successful
        """
        action = params.get("ACTION")
        if action is None:
            raise GatewayResponseError(None, "Invalid bank response status")

        try:
            status = GatewayAction(str(action))
        except ValueError:
            raise GatewayResponseError(str(action), "Unknown bank response status") from None

        if status is GatewayAction.SUCCESS:
            return self.verify_signature(params)

        logger.warning(
            "Gateway rejected transaction: order=%s, action=%s, rc=%s",
            params.get("ORDER"),
            status.value,
            params.get("RC"),
        )
        raise GatewayResponseError(status.value, _ACTION_ERRORS[status])
