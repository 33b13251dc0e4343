# --------------------------------------------------------------
# File: crypto_sign.py
# Description: Funciones para gestionar claves y firmas Ed25519.
# --------------------------------------------------------------
"""Abstracciones criptográficas para generación y validación Ed25519.

Las claves viajan en su codificación cruda de RFC 8032: 32 bytes para la
clave pública y 32 bytes de semilla para la privada.
"""

import logging

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519

from cryptocore.codec import require_length
from cryptocore.errors import InvalidKeyError
from cryptocore.models import KeyPair

logger = logging.getLogger(__name__)

KEY_SIZE = 32
SIGNATURE_SIZE = 64


def ed25519_generate_keypair() -> KeyPair:
    """Genera un par de claves Ed25519 en formato crudo.

    Returns:
        KeyPair: Clave pública y semilla privada, 32 bytes cada una.

    """

    logger.debug("Generating Ed25519 keypair")
    private_key = ed25519.Ed25519PrivateKey.generate()
    private_raw = private_key.private_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PrivateFormat.Raw,
        encryption_algorithm=serialization.NoEncryption(),
    )
    public_raw = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )
    return KeyPair(public_key=public_raw, private_key=private_raw)


def ed25519_sign(private_raw: bytes, message: bytes) -> bytes:
    """Firma un mensaje con la clave privada Ed25519 proporcionada.

    Args:
        private_raw (bytes): Semilla privada de 32 bytes.
        message (bytes): Mensaje que se firmará, de cualquier longitud.

    Returns:
        bytes: Firma Ed25519 de 64 bytes, determinista para cada par
        (mensaje, clave).

    Raises:
        InvalidKeyError: Si la clave privada no tiene 32 bytes.

    """

    if len(private_raw) != KEY_SIZE:
        raise InvalidKeyError(f"La clave privada Ed25519 debe tener {KEY_SIZE} bytes.")
    try:
        key = ed25519.Ed25519PrivateKey.from_private_bytes(private_raw)
    except ValueError:
        raise InvalidKeyError("La clave privada Ed25519 no es válida.") from None
    return key.sign(message)


def ed25519_verify(public_raw: bytes, message: bytes, signature: bytes) -> bool:
    """Verifica una firma Ed25519 devolviendo el resultado como booleano.

    Una firma que no corresponde al mensaje o a la clave es un resultado
    normal (``False``), no una excepción.

    Args:
        public_raw (bytes): Clave pública de 32 bytes.
        message (bytes): Mensaje original firmado.
        signature (bytes): Firma a verificar.

    Returns:
        bool: ``True`` si la firma es válida; ``False`` en caso contrario.

    Raises:
        InvalidLengthError: Si la firma no tiene 64 bytes.
        InvalidKeyError: Si la clave pública no tiene 32 bytes o no es una
            codificación válida.

    """

    require_length(signature, SIGNATURE_SIZE, "signature")
    if len(public_raw) != KEY_SIZE:
        raise InvalidKeyError(f"La clave pública Ed25519 debe tener {KEY_SIZE} bytes.")
    try:
        public_key = ed25519.Ed25519PublicKey.from_public_bytes(public_raw)
    except ValueError:
        raise InvalidKeyError("La clave pública Ed25519 no es válida.") from None

    try:
        public_key.verify(signature, message)
    except InvalidSignature:
        return False
    return True
