# --------------------------------------------------------------
# File: codec.py
# Description: Conversión Base64/UTF-8 y validación de longitudes fijas.
# --------------------------------------------------------------
"""Códec de frontera entre el texto de las peticiones y los bytes internos."""

import base64
import binascii
from enum import Enum

from cryptocore.errors import EncodingError, InvalidLengthError

__all__ = [
    "KeyEncoding",
    "b64decode",
    "b64encode",
    "bytes_to_text",
    "decode_key_material",
    "require_length",
    "text_to_bytes",
]


class KeyEncoding(str, Enum):
    """Forma textual de la clave y el nonce AES en una petición."""

    TEXT = "text"
    BASE64 = "base64"


def b64encode(data: bytes) -> str:
    """Codifica bytes en Base64 estándar con relleno."""

    return base64.b64encode(data).decode("ascii")


def b64decode(value: str, field: str = "valor") -> bytes:
    """Decodifica Base64 estándar de forma estricta.

    Se ignoran los espacios en los extremos (habituales al pegar texto), pero
    cualquier carácter fuera del alfabeto o un relleno incorrecto se rechaza.

    Args:
        value (str): Texto Base64 recibido del llamante.
        field (str): Nombre del campo, usado sólo en el mensaje de error.

    Returns:
        bytes: Datos binarios decodificados.

    Raises:
        EncodingError: Si el texto no es Base64 válido.

    """

    try:
        return base64.b64decode(value.strip(), validate=True)
    except (binascii.Error, ValueError):
        # ValueError cubre texto con caracteres no ASCII.
        raise EncodingError(f"El campo '{field}' no contiene Base64 válido.") from None


def text_to_bytes(value: str, field: str = "mensaje") -> bytes:
    """Convierte texto a UTF-8, rechazando sustitutos sueltos."""

    try:
        return value.encode("utf-8")
    except UnicodeEncodeError:
        raise EncodingError(f"El campo '{field}' no puede codificarse en UTF-8.") from None


def bytes_to_text(data: bytes, field: str = "mensaje") -> str:
    """Interpreta bytes como UTF-8 estricto.

    Raises:
        EncodingError: Si los bytes no forman UTF-8 válido.

    """

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        raise EncodingError(f"El campo '{field}' no es texto UTF-8 válido.") from None


def require_length(data: bytes, expected: int, field: str) -> bytes:
    """Comprueba que ``data`` tenga exactamente ``expected`` bytes.

    Args:
        data (bytes): Valor ya decodificado.
        expected (int): Longitud exigida por la primitiva.
        field (str): Nombre del campo para el mensaje de error.

    Returns:
        bytes: El mismo valor, para poder encadenar la llamada.

    Raises:
        InvalidLengthError: Si la longitud no coincide.

    """

    if len(data) != expected:
        raise InvalidLengthError(
            f"El campo '{field}' debe tener {expected} bytes (recibidos {len(data)})."
        )
    return data


def decode_key_material(value: str, encoding: KeyEncoding, field: str) -> bytes:
    """Obtiene los bytes de una clave o nonce AES según su forma textual."""

    if KeyEncoding(encoding) is KeyEncoding.BASE64:
        return b64decode(value, field)
    return text_to_bytes(value, field)
