# --------------------------------------------------------------
# File: errors.py
# Description: Taxonomía de errores expuesta por los motores criptográficos.
# --------------------------------------------------------------
"""Excepciones de dominio compartidas por el códec, los motores y la fachada."""

from enum import Enum

__all__ = [
    "AuthenticationFailure",
    "CryptoServiceError",
    "DecryptionFailure",
    "EncodingError",
    "ErrorKind",
    "InvalidKeyError",
    "InvalidLengthError",
    "InvalidParameterError",
    "PayloadTooLargeError",
]


class ErrorKind(str, Enum):
    """Identificadores estables de cada categoría de fallo."""

    ENCODING = "EncodingError"
    INVALID_LENGTH = "InvalidLength"
    INVALID_KEY = "InvalidKey"
    INVALID_PARAMETER = "InvalidParameter"
    PAYLOAD_TOO_LARGE = "PayloadTooLarge"
    AUTHENTICATION_FAILURE = "AuthenticationFailure"
    DECRYPTION_FAILURE = "DecryptionFailure"


class CryptoServiceError(Exception):
    """Error base de dominio con un tipo estable y un mensaje no sensible.

    Attributes:
        kind (ErrorKind): Categoría del fallo dentro de la taxonomía.
        message (str): Descripción apta para mostrarse al llamante. Nunca
            contiene bytes de claves ni texto en claro.

    """

    kind: ErrorKind = ErrorKind.INVALID_PARAMETER

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


class EncodingError(CryptoServiceError):
    """Base64 mal formado o texto que no es UTF-8 válido."""

    kind = ErrorKind.ENCODING


class InvalidLengthError(CryptoServiceError):
    """Clave, nonce o firma con un número de bytes distinto del exigido."""

    kind = ErrorKind.INVALID_LENGTH


class InvalidKeyError(CryptoServiceError):
    """Material de clave imposible de interpretar o estructuralmente inválido."""

    kind = ErrorKind.INVALID_KEY


class InvalidParameterError(CryptoServiceError):
    """Parámetro no soportado o petición con forma incorrecta."""

    kind = ErrorKind.INVALID_PARAMETER


class PayloadTooLargeError(CryptoServiceError):
    """El texto en claro supera la capacidad del esquema RSA-OAEP."""

    kind = ErrorKind.PAYLOAD_TOO_LARGE


class AuthenticationFailure(CryptoServiceError):
    """La etiqueta AES-GCM no verifica: clave, nonce o datos incorrectos."""

    kind = ErrorKind.AUTHENTICATION_FAILURE


class DecryptionFailure(CryptoServiceError):
    """El descifrado RSA-OAEP no produjo un mensaje válido."""

    kind = ErrorKind.DECRYPTION_FAILURE
