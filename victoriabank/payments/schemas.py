"""P_SIGN configuration enums and gateway codes."""

from enum import Enum


class SignatureAlgo(str, Enum):
    """P_SIGN hash algorithm."""

    MD5 = "md5"  # legacy
    SHA256 = "sha256"


class MacPolicy(str, Enum):
    """Handling of empty fields during MAC construction."""

    STRICT = "strict"
    LENIENT = "lenient"


class GatewayAction(str, Enum):
    """E-Gateway ACTION codes."""

    SUCCESS = "0"
    DUPLICATE = "1"
    DECLINED = "2"
    FAULT = "3"
