"""
Пары ключей secp256k1 и edwards25519 для блокчейн адресов и подписей
"""

from rosetta_keys.curves import CurveType
from rosetta_keys.errors import (
    CurveMismatchError,
    InvalidPrivateKeyError,
    InvalidPrivateKeyLengthError,
    InvalidPublicKeyError,
    KeyGenerationError,
    KeyPairError,
    MalformedHexError,
    UnsupportedCurveError,
)
from rosetta_keys.keys import (
    KeyPair,
    PrivateKey,
    PublicKey,
    generate_keypair,
    import_private_key,
)

__version__ = "1.0.0"
__all__ = [
    "CurveType",
    "KeyPair",
    "PrivateKey",
    "PublicKey",
    "generate_keypair",
    "import_private_key",
    "KeyPairError",
    "UnsupportedCurveError",
    "KeyGenerationError",
    "MalformedHexError",
    "CurveMismatchError",
    "InvalidPrivateKeyLengthError",
    "InvalidPrivateKeyError",
    "InvalidPublicKeyError",
]
