"""
Исключения для работы с парами ключей
"""


class KeyPairError(ValueError):
    """Базовое исключение пакета"""


class UnsupportedCurveError(KeyPairError):
    """Запрошенная кривая не поддерживается"""

    def __init__(self, curve):
        self.curve = curve
        super().__init__(f"unsupported curve type: {curve!r}")


class KeyGenerationError(KeyPairError):
    """Ошибка генерации или деривации ключа в библиотеке кривой"""


class MalformedHexError(KeyPairError):
    """Невалидная hex строка или документ ключа"""


class CurveMismatchError(KeyPairError):
    """Кривые приватного и публичного ключей различаются"""

    def __init__(self, private_curve, public_curve):
        self.private_curve = private_curve
        self.public_curve = public_curve
        super().__init__(
            f"curve types do not match: private key is {private_curve}, "
            f"public key is {public_curve}"
        )


class InvalidPrivateKeyLengthError(KeyPairError):
    """Длина приватного ключа не соответствует кривой"""

    def __init__(self, curve, expected: int, actual: int):
        self.curve = curve
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"invalid privkey length: {curve} expects {expected} bytes, got {actual}"
        )


class InvalidPrivateKeyError(KeyPairError):
    """Приватный ключ отвергнут библиотекой кривой"""


class InvalidPublicKeyError(KeyPairError):
    """Публичный ключ не является точкой кривой"""
