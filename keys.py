"""
Модуль для работы с парами ключей (secp256k1, edwards25519)
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple, Union

from cryptography.hazmat.primitives.asymmetric import ec, ed25519
from eth_keys import keys
from eth_keys.exceptions import ValidationError

from .curves import CurveType
from .errors import (
    CurveMismatchError,
    InvalidPrivateKeyError,
    InvalidPrivateKeyLengthError,
    InvalidPublicKeyError,
    KeyGenerationError,
    KeyPairError,
    MalformedHexError,
)
from .logger import get_logger
from .utils import canonical_json, decode_hex, encode_hex, load_document

logger = get_logger()

HEX_BYTES = "hex_bytes"
CURVE_TYPE = "curve_type"
PUBLIC_KEY = "public_key"
PRIVATE_KEY = "private_key"


def _sub_document(data: Any, name: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise MalformedHexError(f"malformed document: {name} must be an object")
    return data


def _decode_hex_bytes(data: Any, name: str) -> bytes:
    data = _sub_document(data, name)
    if HEX_BYTES not in data:
        raise MalformedHexError(f"malformed document: {name} has no {HEX_BYTES!r}")
    return decode_hex(data[HEX_BYTES])


@dataclass
class PrivateKey:
    """
    Приватный ключ

    Сериализуется в {"hex_bytes": "..."}; тип кривой в документ не входит
    и хранится в контексте KeyPair.
    """

    bytes: bytes = field(repr=False)
    curve_type: CurveType

    def to_dict(self) -> Dict[str, str]:
        """Возвращает документ ключа"""
        return {HEX_BYTES: encode_hex(self.bytes)}

    def to_json(self) -> str:
        return canonical_json(self.to_dict())

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        curve_type: Union[CurveType, str]
    ) -> "PrivateKey":
        """
        Создает PrivateKey из документа ключа

        Args:
            data: Документ вида {"hex_bytes": "..."}
            curve_type: Кривая владеющей пары ключей

        Returns:
            PrivateKey объект

        Raises:
            MalformedHexError: Если документ или hex строка невалидны
            UnsupportedCurveError: Если кривая не поддерживается
        """
        key_bytes = _decode_hex_bytes(data, PRIVATE_KEY)
        return cls(key_bytes, CurveType.parse(curve_type))

    @classmethod
    def from_json(cls, text: str, curve_type: Union[CurveType, str]) -> "PrivateKey":
        return cls.from_dict(load_document(text), curve_type)


@dataclass
class PublicKey:
    """Публичный ключ, сериализуется вместе с типом кривой"""

    bytes: bytes
    curve_type: CurveType

    def validate(self) -> None:
        """
        Проверяет публичный ключ

        secp256k1: сжатая SEC1 точка, лежащая на кривой.
        edwards25519: 32 байта, принятые cryptography (точка не декодируется).

        Raises:
            InvalidPublicKeyError: Если ключ невалиден
            UnsupportedCurveError: Если кривая не поддерживается
        """
        curve = CurveType.parse(self.curve_type)
        if len(self.bytes) != curve.public_key_length:
            raise InvalidPublicKeyError(
                f"invalid pubkey length: {curve} expects "
                f"{curve.public_key_length} bytes, got {len(self.bytes)}"
            )
        try:
            if curve is CurveType.SECP256K1:
                ec.EllipticCurvePublicKey.from_encoded_point(ec.SECP256K1(), self.bytes)
            else:
                ed25519.Ed25519PublicKey.from_public_bytes(self.bytes)
        except ValueError as e:
            raise InvalidPublicKeyError(f"invalid pubkey for {curve}: {e}") from e

    def to_dict(self) -> Dict[str, str]:
        return {
            HEX_BYTES: encode_hex(self.bytes),
            CURVE_TYPE: str(CurveType.parse(self.curve_type)),
        }

    def to_json(self) -> str:
        return canonical_json(self.to_dict())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PublicKey":
        """Создает PublicKey из документа {"hex_bytes": ..., "curve_type": ...}"""
        key_bytes = _decode_hex_bytes(data, PUBLIC_KEY)
        if CURVE_TYPE not in data:
            raise MalformedHexError(f"malformed document: {PUBLIC_KEY} has no {CURVE_TYPE!r}")
        return cls(key_bytes, CurveType.parse(data[CURVE_TYPE]))

    @classmethod
    def from_json(cls, text: str) -> "PublicKey":
        return cls.from_dict(load_document(text))


@dataclass
class KeyPair:
    """
    Пара ключей одной кривой

    Поля можно перезаписывать после создания (например, при импорте),
    поэтому соответствие кривых проверяется в validate(), а не в конструкторе.
    """

    public_key: PublicKey
    private_key: PrivateKey

    def validate(self) -> None:
        """
        Проверяет структурную корректность пары ключей

        Порядок проверок: совпадение кривых, длина приватного ключа,
        корректность публичного ключа.

        Raises:
            CurveMismatchError: Если кривые ключей различаются
            InvalidPrivateKeyLengthError: Если длина приватного ключа не та
            InvalidPublicKeyError: Если публичный ключ невалиден
        """
        private_key = self.private_key
        public_key = self.public_key

        if private_key.curve_type != public_key.curve_type:
            raise CurveMismatchError(private_key.curve_type, public_key.curve_type)

        curve = CurveType.parse(private_key.curve_type)
        expected = curve.private_key_length
        if len(private_key.bytes) != expected:
            raise InvalidPrivateKeyLengthError(curve, expected, len(private_key.bytes))

        public_key.validate()

    def is_valid(self) -> bool:
        """Возвращает True если пара ключей корректна"""
        try:
            self.validate()
        except KeyPairError as e:
            logger.debug("keypair is not valid: %s", e)
            return False
        return True

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        return {
            PUBLIC_KEY: self.public_key.to_dict(),
            PRIVATE_KEY: self.private_key.to_dict(),
        }

    def to_json(self) -> str:
        return canonical_json(self.to_dict())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "KeyPair":
        """Создает KeyPair; кривая приватного ключа берется из публичного"""
        data = _sub_document(data, "keypair")
        public_key = PublicKey.from_dict(data.get(PUBLIC_KEY))
        private_key = PrivateKey.from_dict(data.get(PRIVATE_KEY), public_key.curve_type)
        return cls(public_key=public_key, private_key=private_key)

    @classmethod
    def from_json(cls, text: str) -> "KeyPair":
        return cls.from_dict(load_document(text))


def _derive_public_key(private_key: bytes, curve: CurveType) -> bytes:
    if curve is CurveType.SECP256K1:
        # cryptography отвергает ноль, eth_keys - скаляр >= порядка группы
        ec.derive_private_key(int.from_bytes(private_key, "big"), ec.SECP256K1())
        # Сжатый SEC1 формат (33 байта)
        return keys.PrivateKey(private_key).public_key.to_compressed_bytes()
    sk = ed25519.Ed25519PrivateKey.from_private_bytes(private_key)
    return sk.public_key().public_bytes_raw()


def _generate_secp256k1() -> Tuple[bytes, bytes]:
    private_key_obj = ec.generate_private_key(ec.SECP256K1())
    private_value = private_key_obj.private_numbers().private_value
    private_key = private_value.to_bytes(CurveType.SECP256K1.private_key_length, "big")
    return private_key, _derive_public_key(private_key, CurveType.SECP256K1)


def _generate_edwards25519() -> Tuple[bytes, bytes]:
    sk = ed25519.Ed25519PrivateKey.generate()
    return sk.private_bytes_raw(), sk.public_key().public_bytes_raw()


_GENERATORS = {
    CurveType.SECP256K1: _generate_secp256k1,
    CurveType.EDWARDS25519: _generate_edwards25519,
}


def generate_keypair(curve: Union[CurveType, str]) -> KeyPair:
    """
    Генерирует новую пару ключей

    Args:
        curve: Тип кривой (CurveType или "secp256k1" / "edwards25519")

    Returns:
        KeyPair, оба ключа помечены кривой curve

    Raises:
        UnsupportedCurveError: Если кривая не поддерживается
        KeyGenerationError: Если библиотека кривой не смогла создать ключ
    """
    curve = CurveType.parse(curve)
    try:
        private_key, public_key = _GENERATORS[curve]()
    except Exception as e:
        logger.debug("keypair generation failed for %s", curve)
        raise KeyGenerationError(f"unable to generate keypair for {curve}: {e}") from e

    logger.debug("generated %s keypair", curve)
    return KeyPair(
        public_key=PublicKey(public_key, curve),
        private_key=PrivateKey(private_key, curve),
    )


def import_private_key(private_key_hex: str, curve: Union[CurveType, str]) -> KeyPair:
    """
    Создает пару ключей из приватного ключа в hex формате

    Args:
        private_key_hex: Приватный ключ (hex, без префикса "0x")
        curve: Тип кривой

    Returns:
        Проверенный KeyPair

    Raises:
        UnsupportedCurveError: Если кривая не поддерживается
        MalformedHexError: Если hex строка невалидна
        InvalidPrivateKeyLengthError: Если длина ключа не соответствует кривой
        InvalidPrivateKeyError: Если кривая отвергает ключ (ноль, >= порядка группы)
    """
    curve = CurveType.parse(curve)
    private_key = decode_hex(private_key_hex)

    expected = curve.private_key_length
    if len(private_key) != expected:
        raise InvalidPrivateKeyLengthError(curve, expected, len(private_key))

    try:
        public_key = _derive_public_key(private_key, curve)
    except (ValidationError, ValueError) as e:
        logger.debug("rejected %s private key on import", curve)
        raise InvalidPrivateKeyError(f"invalid privkey for {curve}") from e

    keypair = KeyPair(
        public_key=PublicKey(public_key, curve),
        private_key=PrivateKey(private_key, curve),
    )
    keypair.validate()
    logger.debug("imported %s keypair", curve)
    return keypair
