from typing import Any


class AppException(Exception):
    """Base application exception."""

    error_code: str = "APP_ERROR"
    message: str = "An application error occurred"

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.__class__.message
        self.error_code = error_code or self.__class__.error_code
        self.details = details or {}
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(error_code={self.error_code!r}, message={self.message!r})"


class PSignError(AppException):
    """P_SIGN processing error."""

    error_code = "PSIGN_ERROR"
    message = "P_SIGN processing failed"


class MissingSignatureFieldError(PSignError):
    """A field required for MAC construction is absent or empty."""

    error_code = "MISSING_SIGNATURE_FIELD"
    message = "Empty P_SIGN parameter"

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(
            message=message or f"Empty P_SIGN parameter: {field}",
            details={"field": field},
        )


class InvalidKeyMaterialError(PSignError):
    """Private or public key cannot be parsed, or the passphrase is wrong."""

    error_code = "INVALID_KEY_MATERIAL"
    message = "Invalid key material"


class SignatureGenerationFailedError(PSignError):
    """Signing primitive failed despite valid key material."""

    error_code = "SIGNATURE_GENERATION_FAILED"
    message = "Signature generation failed"


class UnknownAlgorithmError(PSignError):
    """Signature algorithm selector is not supported."""

    error_code = "UNKNOWN_ALGORITHM"
    message = "Unknown signature algorithm"

    def __init__(self, algo: object, message: str | None = None) -> None:
        self.algo = algo
        super().__init__(
            message=message or f"Unknown signature algorithm: {algo}",
            details={"algo": str(algo)},
        )


class GatewayResponseError(PSignError):
    """Gateway response reports a non-successful ACTION."""

    error_code = "GATEWAY_RESPONSE_ERROR"
    message = "Unknown bank response status"

    def __init__(self, action: str | None, message: str | None = None) -> None:
        self.action = action
        super().__init__(
            message=message,
            details={"action": action},
        )
