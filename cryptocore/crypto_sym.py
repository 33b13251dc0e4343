# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-256-GCM para cifrado y descifrado simétrico seguro.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico autenticado con clave y nonce del llamante.

El formato del criptograma es ``ciphertext || tag``, con la etiqueta GCM de
16 bytes siempre al final. No se admiten datos autenticados adicionales.

El servicio no recuerda nonces entre llamadas: garantizar que un par
(clave, nonce) no se reutiliza para dos mensajes distintos es responsabilidad
del llamante. Reutilizarlo rompe por completo la confidencialidad.
"""

import logging

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from cryptocore.codec import require_length
from cryptocore.errors import AuthenticationFailure
from cryptocore.rng import get_secure_random

__all__ = [
    "KEY_SIZE",
    "NONCE_SIZE",
    "TAG_SIZE",
    "aes_gcm_decrypt",
    "aes_gcm_encrypt",
    "aes_generate_key",
    "aes_generate_nonce",
]

logger = logging.getLogger(__name__)

KEY_SIZE = 32  # AES-256
NONCE_SIZE = 12  # 96 bits
TAG_SIZE = 16  # 128 bits


def aes_generate_key() -> bytes:
    """Genera una clave AES-256 aleatoria."""

    return get_secure_random().token_bytes(KEY_SIZE)


def aes_generate_nonce() -> bytes:
    """Genera un nonce de 96 bits aleatorio."""

    return get_secure_random().token_bytes(NONCE_SIZE)


def aes_gcm_encrypt(key: bytes, nonce: bytes, plaintext: bytes) -> bytes:
    """Cifra datos con AES-256-GCM utilizando la clave y el nonce proporcionados.

    Args:
        key (bytes): Clave simétrica de exactamente 256 bits.
        nonce (bytes): Nonce de 96 bits, único para esta clave.
        plaintext (bytes): Datos a cifrar; pueden estar vacíos.

    Returns:
        bytes: Ciphertext seguido de la etiqueta de autenticación.

    Raises:
        InvalidLengthError: Si la clave o el nonce no tienen la longitud exigida.

    """

    require_length(key, KEY_SIZE, "key")
    require_length(nonce, NONCE_SIZE, "nonce")
    return AESGCM(key).encrypt(nonce, plaintext, None)


def aes_gcm_decrypt(key: bytes, nonce: bytes, ciphertext: bytes) -> bytes:
    """Descifra y autentica un criptograma AES-256-GCM.

    Args:
        key (bytes): Clave simétrica que protege los datos.
        nonce (bytes): Nonce usado durante el cifrado.
        ciphertext (bytes): Datos cifrados con la etiqueta al final.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        InvalidLengthError: Si la clave o el nonce no tienen la longitud exigida.
        AuthenticationFailure: Si la etiqueta no verifica o el criptograma
            está truncado. Nunca se devuelve texto parcial.

    """

    require_length(key, KEY_SIZE, "key")
    require_length(nonce, NONCE_SIZE, "nonce")
    if len(ciphertext) < TAG_SIZE:
        raise AuthenticationFailure("El criptograma es demasiado corto para contener la etiqueta.")
    try:
        return AESGCM(key).decrypt(nonce, ciphertext, None)
    except InvalidTag:
        logger.debug("AES-GCM tag verification failed")
        raise AuthenticationFailure("No se ha podido autenticar el criptograma.") from None
