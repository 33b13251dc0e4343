# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar la configuración y reutilizar claves.
# --------------------------------------------------------------

from typing import Iterator

import pytest
from hypothesis import HealthCheck
from hypothesis import settings as hyp_settings

from cryptoapi.services import CommandService, get_service
from cryptocore.config import Settings, get_settings
from cryptocore.crypto_rsa import rsa_generate_keypair
from cryptocore.crypto_sign import ed25519_generate_keypair
from cryptocore.models import KeyPair

_ENV_VARS = (
    "CRYPTO_RSA_MIN_BITS",
    "CRYPTO_RSA_ALLOWED_BITS",
    "CRYPTO_AES_KEY_ENCODING",
    "LOG_LEVEL",
)

# El fixture autouse de aislamiento no guarda estado entre ejemplos de Hypothesis.
hyp_settings.register_profile(
    "cryptodesk",
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
hyp_settings.load_profile("cryptodesk")


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch) -> Iterator[None]:
    """Elimina variables del entorno y vacía las cachés de configuración.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    get_service.cache_clear()

    yield

    get_settings.cache_clear()
    get_service.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Configuración por defecto, independiente del entorno."""
    return Settings()


@pytest.fixture
def service(settings) -> CommandService:
    """Fachada de comandos construida con la configuración por defecto."""
    return CommandService(settings)


@pytest.fixture(scope="session")
def rsa_keypair() -> KeyPair:
    """Par RSA-2048 compartido: generarlo en cada test sería demasiado lento."""
    return rsa_generate_keypair(2048, Settings())


@pytest.fixture(scope="session")
def other_rsa_keypair() -> KeyPair:
    return rsa_generate_keypair(2048, Settings())


@pytest.fixture
def ed_keypair() -> KeyPair:
    return ed25519_generate_keypair()
