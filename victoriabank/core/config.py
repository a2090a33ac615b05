from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """P_SIGN settings loaded from environment variables (VB_ prefix)."""

    model_config = SettingsConfigDict(
        env_prefix="VB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Merchant key (signs outbound requests)
    merchant_private_key: str = Field(
        default="",
        description="Merchant RSA private key in PEM format",
    )
    merchant_private_key_path: Path | None = Field(
        default=None,
        description="Path to merchant private key PEM file (used when key is not inline)",
    )
    merchant_private_key_passphrase: str | None = Field(
        default=None,
        description="Passphrase for encrypted merchant private key",
    )

    # Bank key (verifies inbound responses)
    bank_public_key: str = Field(
        default="",
        description="Bank RSA public key or certificate in PEM format",
    )
    bank_public_key_path: Path | None = Field(
        default=None,
        description="Path to bank public key PEM file (used when key is not inline)",
    )

    # Signature
    signature_algo: Literal["md5", "sha256"] = Field(
        default="sha256",
        description="P_SIGN hash algorithm (md5 is the legacy gateway scheme)",
    )
    inbound_mac_policy: Literal["strict", "lenient"] = Field(
        default="strict",
        description="Empty gateway fields: fail (strict) or substitute '-' (lenient)",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_format: Literal["json", "standard"] = Field(
        default="standard",
        description="Log format (json for production, standard for dev)",
    )

    def read_merchant_private_key(self) -> str:
        """Return merchant private key PEM, inline value first, then file."""
        if self.merchant_private_key:
            return self.merchant_private_key
        if self.merchant_private_key_path is not None:
            return self.merchant_private_key_path.read_text(encoding="utf-8")
        return ""

    def read_bank_public_key(self) -> str:
        """Return bank public key PEM, inline value first, then file."""
        if self.bank_public_key:
            return self.bank_public_key
        if self.bank_public_key_path is not None:
            return self.bank_public_key_path.read_text(encoding="utf-8")
        return ""


@lru_cache
def get_settings() -> Settings:
    """Load settings from environment on first use."""
    return Settings()
