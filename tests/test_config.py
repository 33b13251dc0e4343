# --------------------------------------------------------------
# File: test_config.py
# Description: Pruebas de la carga y validación de la configuración del servicio.
# --------------------------------------------------------------

import logging

import pytest

from cryptocore.codec import KeyEncoding
from cryptocore.config import Settings, configure_logging, get_settings, load_settings


def test_defaults_without_environment():
    """Valida los valores por defecto cuando no hay variables definidas.

    Returns:
        None: Las aserciones comparan cada parámetro.
    """
    settings = load_settings()
    assert settings.rsa_min_bits == 2048
    assert settings.rsa_allowed_bits == (2048, 3072, 4096)
    assert settings.aes_key_encoding is KeyEncoding.TEXT
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CRYPTO_RSA_MIN_BITS", "3072")
    monkeypatch.setenv("CRYPTO_RSA_ALLOWED_BITS", "3072, 4096")
    monkeypatch.setenv("CRYPTO_AES_KEY_ENCODING", "base64")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.rsa_min_bits == 3072
    assert settings.rsa_allowed_bits == (3072, 4096)
    assert settings.aes_key_encoding is KeyEncoding.BASE64
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize(
    "name, value",
    [
        ("CRYPTO_RSA_MIN_BITS", "1024"),  # por debajo del suelo
        ("CRYPTO_RSA_ALLOWED_BITS", "1024,2048"),  # tamaño inseguro admitido
        ("CRYPTO_RSA_ALLOWED_BITS", ""),
        ("CRYPTO_AES_KEY_ENCODING", "hex"),
        ("LOG_LEVEL", "chatty"),
    ],
)
def test_invalid_configuration_fails_at_load(monkeypatch, name, value):
    """Garantiza que una configuración insegura o inválida no llegue a usarse.

    Returns:
        None: Se espera ValueError al cargar.
    """
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError):
        load_settings()


def test_get_settings_is_cached(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("CRYPTO_AES_KEY_ENCODING", "base64")
    assert get_settings() is first
    get_settings.cache_clear()
    assert get_settings().aes_key_encoding is KeyEncoding.BASE64


def test_settings_are_frozen():
    settings = Settings()
    with pytest.raises(ValueError):
        settings.rsa_min_bits = 1024


def test_configure_logging_applies_level(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    configure_logging(Settings(log_level="info"))
    assert calls[0]["level"] == "INFO"
