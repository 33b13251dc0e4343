# --------------------------------------------------------------
# File: crypto_rsa.py
# Description: Generación de claves RSA y cifrado asimétrico con OAEP-SHA256.
# --------------------------------------------------------------
"""Cifrado de clave pública RSAES-OAEP.

Esquema: OAEP con SHA-256, MGF1-SHA-256 y etiqueta vacía. La sobrecarga del
relleno es ``2 * 32 + 2 = 66`` bytes, de modo que una clave de ``k`` bytes
admite como máximo ``k - 66`` bytes de texto en claro (190 para RSA-2048).

Las claves se serializan en DER: ``SubjectPublicKeyInfo`` para la pública y
``PKCS#8`` sin cifrar para la privada.
"""

import logging
from typing import Optional

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from cryptocore.config import RSA_SAFE_FLOOR_BITS, Settings, get_settings
from cryptocore.errors import (
    DecryptionFailure,
    InvalidKeyError,
    InvalidParameterError,
    PayloadTooLargeError,
)
from cryptocore.models import KeyPair

__all__ = [
    "OAEP_OVERHEAD",
    "PUBLIC_EXPONENT",
    "rsa_decrypt",
    "rsa_encrypt",
    "rsa_generate_keypair",
    "rsa_max_plaintext_size",
    "validate_rsa_bits",
]

logger = logging.getLogger(__name__)

PUBLIC_EXPONENT = 65537
_HASH_SIZE = hashes.SHA256.digest_size
OAEP_OVERHEAD = 2 * _HASH_SIZE + 2


def _oaep() -> padding.OAEP:
    return padding.OAEP(
        mgf=padding.MGF1(algorithm=hashes.SHA256()),
        algorithm=hashes.SHA256(),
        label=None,
    )


def _modulus_bytes(key_size_bits: int) -> int:
    return (key_size_bits + 7) // 8


def rsa_max_plaintext_size(key_size_bits: int) -> int:
    """Capacidad en bytes de OAEP-SHA256 para un módulo de ``key_size_bits``."""

    return _modulus_bytes(key_size_bits) - OAEP_OVERHEAD


def validate_rsa_bits(bits: int, settings: Optional[Settings] = None) -> None:
    """Comprueba que ``bits`` sea un tamaño de módulo admitido.

    Raises:
        InvalidParameterError: Si el tamaño no es un entero admitido o queda
            por debajo del mínimo configurado.

    """

    settings = settings or get_settings()
    if isinstance(bits, bool) or not isinstance(bits, int):
        raise InvalidParameterError("El tamaño de clave RSA debe ser un entero.")
    if bits < settings.rsa_min_bits:
        raise InvalidParameterError(
            f"El tamaño de clave RSA mínimo es {settings.rsa_min_bits} bits."
        )
    if bits not in settings.rsa_allowed_bits:
        allowed = ", ".join(str(size) for size in settings.rsa_allowed_bits)
        raise InvalidParameterError(f"Tamaño de clave RSA no soportado. Valores admitidos: {allowed}.")


def rsa_generate_keypair(bits: int, settings: Optional[Settings] = None) -> KeyPair:
    """Genera un par de claves RSA serializado en DER.

    La búsqueda de primos es aleatoria y no tiene un tiempo máximo acotado;
    conviene invocarla fuera de hilos sensibles a la latencia.

    Args:
        bits (int): Longitud del módulo en bits.
        settings (Optional[Settings]): Configuración con los tamaños admitidos.
            Por defecto se usa la del proceso.

    Returns:
        KeyPair: Clave pública SPKI y clave privada PKCS#8, ambas en DER.

    Raises:
        InvalidParameterError: Si el tamaño no es admitido.

    """

    validate_rsa_bits(bits, settings)
    logger.debug("Generating RSA keypair bits=%d", bits)
    private_key = rsa.generate_private_key(public_exponent=PUBLIC_EXPONENT, key_size=bits)
    private_der = private_key.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    public_der = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    return KeyPair(public_key=public_der, private_key=private_der)


def _load_public_key(public_der: bytes) -> rsa.RSAPublicKey:
    try:
        key = serialization.load_der_public_key(public_der)
    except (ValueError, TypeError, UnsupportedAlgorithm):
        raise InvalidKeyError("La clave pública RSA no es válida.") from None
    if not isinstance(key, rsa.RSAPublicKey):
        raise InvalidKeyError("La clave pública no es una clave RSA.")
    if key.key_size < RSA_SAFE_FLOOR_BITS:
        raise InvalidKeyError(f"La clave pública RSA tiene menos de {RSA_SAFE_FLOOR_BITS} bits.")
    return key


def _load_private_key(private_der: bytes) -> rsa.RSAPrivateKey:
    try:
        key = serialization.load_der_private_key(private_der, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm):
        raise InvalidKeyError("La clave privada RSA no es válida.") from None
    if not isinstance(key, rsa.RSAPrivateKey):
        raise InvalidKeyError("La clave privada no es una clave RSA.")
    return key


def rsa_encrypt(public_der: bytes, plaintext: bytes) -> bytes:
    """Cifra un mensaje corto con la clave pública RSA indicada.

    Args:
        public_der (bytes): Clave pública en DER ``SubjectPublicKeyInfo``.
        plaintext (bytes): Mensaje a cifrar.

    Returns:
        bytes: Criptograma de la misma longitud que el módulo.

    Raises:
        InvalidKeyError: Si la clave no se puede interpretar o no es RSA.
        PayloadTooLargeError: Si el mensaje excede la capacidad de OAEP.

    """

    key = _load_public_key(public_der)
    capacity = rsa_max_plaintext_size(key.key_size)
    if len(plaintext) > capacity:
        raise PayloadTooLargeError(
            f"El mensaje ocupa {len(plaintext)} bytes; el máximo para RSA-{key.key_size} "
            f"con OAEP-SHA256 es {capacity}."
        )
    return key.encrypt(plaintext, _oaep())


def rsa_decrypt(private_der: bytes, ciphertext: bytes) -> bytes:
    """Descifra un criptograma RSA-OAEP.

    Todos los fallos de relleno producen el mismo error y el mismo mensaje.

    Raises:
        InvalidKeyError: Si la clave privada no se puede interpretar o no es RSA.
        DecryptionFailure: Si el criptograma no corresponde a la clave o el
            relleno no es válido.

    """

    key = _load_private_key(private_der)
    if len(ciphertext) != _modulus_bytes(key.key_size):
        raise DecryptionFailure("No se ha podido descifrar el mensaje RSA.")
    try:
        return key.decrypt(ciphertext, _oaep())
    except ValueError:
        raise DecryptionFailure("No se ha podido descifrar el mensaje RSA.") from None
