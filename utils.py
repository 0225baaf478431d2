"""
Утилиты для кодирования ключей
"""

import binascii
import json
from typing import Any, Dict

from .errors import MalformedHexError


def encode_hex(data: bytes) -> str:
    """Кодирует байты в hex (нижний регистр, без префикса)"""
    return bytes(data).hex()


def decode_hex(data: str) -> bytes:
    """
    Строго декодирует hex строку

    В отличие от bytes.fromhex не допускает пробелы и префикс "0x".

    Args:
        data: hex строка

    Returns:
        Декодированные байты

    Raises:
        MalformedHexError: Если строка содержит не-hex символы или нечетной длины
    """
    if not isinstance(data, str):
        raise MalformedHexError(f"malformed hex: expected str, got {type(data).__name__}")
    if len(data) % 2:
        raise MalformedHexError(f"malformed hex: odd length {len(data)}")
    try:
        return binascii.unhexlify(data)
    except ValueError as e:
        raise MalformedHexError("malformed hex: non-hex characters") from e


def canonical_json(obj: Dict[str, Any]) -> str:
    # Детерминированный JSON для документов ключей
    return json.dumps(obj, separators=(",", ":"), sort_keys=True)


def load_document(text: str) -> Dict[str, Any]:
    """Разбирает JSON документ ключа"""
    try:
        document = json.loads(text)
    except (TypeError, ValueError) as e:
        raise MalformedHexError(f"malformed document: {e}") from e
    if not isinstance(document, dict):
        raise MalformedHexError("malformed document: expected a JSON object")
    return document
