# --------------------------------------------------------------
# File: test_crypto_sign.py
# Description: Pruebas para las primitivas de firma digital basadas en Ed25519.
# --------------------------------------------------------------

import pytest
from hypothesis import given, settings as hyp_settings
from hypothesis import strategies as st

from cryptocore.crypto_sign import (
    KEY_SIZE,
    SIGNATURE_SIZE,
    ed25519_generate_keypair,
    ed25519_sign,
    ed25519_verify,
)
from cryptocore.errors import InvalidKeyError, InvalidLengthError

# Vector 1 de RFC 8032, sección 7.1.
RFC8032_SECRET = bytes.fromhex("9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60")
RFC8032_PUBLIC = bytes.fromhex("d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a")
RFC8032_SIGNATURE = bytes.fromhex(
    "e5564300c360ac729086e2cc806e828a84877f1eb8e5d974d873e06522490155"
    "5fb8821590a33bacc61e39701cf9b46bd25bf5f0595bbe24655141438e7a100b"
)


def test_keypair_sizes(ed_keypair):
    assert len(ed_keypair.public_key) == KEY_SIZE
    assert len(ed_keypair.private_key) == KEY_SIZE


def test_keypair_repr_hides_private_key(ed_keypair):
    """Comprueba que la clave privada no aparezca en la representación del modelo.

    Returns:
        None: Las aserciones revisan el texto de ``repr``.
    """
    assert "private_key" not in repr(ed_keypair)
    assert "public_key" in repr(ed_keypair)


def test_rfc8032_vector():
    """Valida la implementación frente al vector de prueba publicado.

    Returns:
        None: La firma debe coincidir byte a byte y verificar.
    """
    signature = ed25519_sign(RFC8032_SECRET, b"")
    assert signature == RFC8032_SIGNATURE
    assert ed25519_verify(RFC8032_PUBLIC, b"", signature) is True


@given(message=st.binary(max_size=2048))
@hyp_settings(max_examples=50)
def test_sign_verify_ok(message):
    """Comprueba que la firma generada sea válida con la clave correspondiente.

    Returns:
        None: Las aserciones usan el resultado booleano de la verificación.
    """
    keypair = ed25519_generate_keypair()
    sig = ed25519_sign(keypair.private_key, message)
    assert len(sig) == SIGNATURE_SIZE
    assert ed25519_verify(keypair.public_key, message, sig) is True


def test_signature_is_deterministic(ed_keypair):
    assert ed25519_sign(ed_keypair.private_key, b"abc") == ed25519_sign(ed_keypair.private_key, b"abc")


def test_verify_fails_with_other_key(ed_keypair):
    """Verifica que otra clave pública no valide la firma.

    Returns:
        None: La verificación debe devolver False sin lanzar excepciones.
    """
    other = ed25519_generate_keypair()
    sig = ed25519_sign(ed_keypair.private_key, b"hola")
    assert ed25519_verify(other.public_key, b"hola", sig) is False


def test_verify_fails_if_message_tampered(ed_keypair):
    sig = ed25519_sign(ed_keypair.private_key, b"abc123")
    assert ed25519_verify(ed_keypair.public_key, b"abc124", sig) is False


@pytest.mark.parametrize("position", [0, 31, 32, 63])
def test_verify_fails_if_signature_tampered(ed_keypair, position):
    sig = bytearray(ed25519_sign(ed_keypair.private_key, b"mensaje"))
    sig[position] ^= 0x01
    assert ed25519_verify(ed_keypair.public_key, b"mensaje", bytes(sig)) is False


@pytest.mark.parametrize("size", [0, 63, 65])
def test_verify_rejects_signature_length(ed_keypair, size):
    with pytest.raises(InvalidLengthError):
        ed25519_verify(ed_keypair.public_key, b"m", b"s" * size)


@pytest.mark.parametrize("size", [0, 31, 33, 64])
def test_verify_rejects_public_key_length(ed_keypair, size):
    sig = ed25519_sign(ed_keypair.private_key, b"m")
    with pytest.raises(InvalidKeyError):
        ed25519_verify(b"p" * size, b"m", sig)


@pytest.mark.parametrize("size", [0, 31, 33, 64])
def test_sign_rejects_private_key_length(size):
    """Garantiza que una clave privada mal formada se rechace como InvalidKey.

    Returns:
        None: Se espera InvalidKeyError.
    """
    with pytest.raises(InvalidKeyError):
        ed25519_sign(b"k" * size, b"m")
