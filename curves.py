"""
Поддерживаемые эллиптические кривые и их параметры
"""

from enum import Enum
from typing import Union

from .errors import UnsupportedCurveError


class CurveType(str, Enum):
    """Тип кривой. Значение совпадает со строкой в JSON документах"""

    SECP256K1 = "secp256k1"
    EDWARDS25519 = "edwards25519"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Union["CurveType", str]) -> "CurveType":
        """
        Приводит значение к CurveType

        Args:
            value: CurveType или его строковое значение

        Returns:
            CurveType

        Raises:
            UnsupportedCurveError: Если кривая не поддерживается
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
        raise UnsupportedCurveError(value)

    @property
    def private_key_length(self) -> int:
        """Длина приватного ключа в байтах"""
        return PRIVATE_KEY_LENGTHS[self]

    @property
    def public_key_length(self) -> int:
        """Длина публичного ключа в байтах"""
        return PUBLIC_KEY_LENGTHS[self]


# secp256k1: 32-байтный скаляр; edwards25519: 32-байтный seed (RFC 8032)
PRIVATE_KEY_LENGTHS = {
    CurveType.SECP256K1: 32,
    CurveType.EDWARDS25519: 32,
}

# secp256k1 хранится в сжатом SEC1 виде (префикс 0x02/0x03 + X)
PUBLIC_KEY_LENGTHS = {
    CurveType.SECP256K1: 33,
    CurveType.EDWARDS25519: 32,
}
