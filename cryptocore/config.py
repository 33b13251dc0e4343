# --------------------------------------------------------------
# File: config.py
# Description: Parámetros del servicio leídos del entorno y del archivo .env.
# --------------------------------------------------------------
"""Configuración validada del servicio criptográfico."""

import logging
import os
from functools import lru_cache
from typing import Optional, Tuple

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from cryptocore.codec import KeyEncoding

load_dotenv()

# Suelo absoluto: ninguna configuración puede bajar de aquí.
RSA_SAFE_FLOOR_BITS = 2048
DEFAULT_RSA_ALLOWED_BITS = (2048, 3072, 4096)
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class Settings(BaseModel):
    """Parámetros ajustables del servicio.

    Attributes:
        rsa_min_bits (int): Módulo RSA mínimo aceptado al generar claves.
        rsa_allowed_bits (Tuple[int, ...]): Tamaños de módulo soportados.
        aes_key_encoding (KeyEncoding): Forma por defecto de clave y nonce AES.
        log_level (str): Nivel de registro para ``configure_logging``.

    """

    model_config = ConfigDict(frozen=True)

    rsa_min_bits: int = RSA_SAFE_FLOOR_BITS
    rsa_allowed_bits: Tuple[int, ...] = DEFAULT_RSA_ALLOWED_BITS
    aes_key_encoding: KeyEncoding = KeyEncoding.TEXT
    log_level: str = "WARNING"

    @field_validator("rsa_min_bits")
    @classmethod
    def _check_floor(cls, value: int) -> int:
        if value < RSA_SAFE_FLOOR_BITS:
            raise ValueError(f"rsa_min_bits must be >= {RSA_SAFE_FLOOR_BITS}")
        return value

    @field_validator("rsa_allowed_bits", mode="before")
    @classmethod
    def _split_sizes(cls, value):
        if isinstance(value, str):
            return tuple(int(part) for part in value.split(",") if part.strip())
        return value

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level {value!r}")
        return level

    @model_validator(mode="after")
    def _check_sizes(self) -> "Settings":
        if not self.rsa_allowed_bits:
            raise ValueError("rsa_allowed_bits must not be empty")
        too_small = [bits for bits in self.rsa_allowed_bits if bits < self.rsa_min_bits]
        if too_small:
            raise ValueError(f"rsa_allowed_bits below rsa_min_bits: {too_small}")
        return self


def load_settings() -> Settings:
    """Construye ``Settings`` a partir de las variables de entorno.

    Returns:
        Settings: Configuración validada.

    Raises:
        ValueError: Si algún valor es inválido (incluye ``ValidationError``).

    """

    values = {
        "rsa_min_bits": os.getenv("CRYPTO_RSA_MIN_BITS", str(RSA_SAFE_FLOOR_BITS)),
        "rsa_allowed_bits": os.getenv(
            "CRYPTO_RSA_ALLOWED_BITS", ",".join(str(bits) for bits in DEFAULT_RSA_ALLOWED_BITS)
        ),
        "aes_key_encoding": os.getenv("CRYPTO_AES_KEY_ENCODING", KeyEncoding.TEXT.value),
        "log_level": os.getenv("LOG_LEVEL", "WARNING"),
    }
    return Settings(**values)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Devuelve la configuración del proceso, cargada una sola vez."""

    return load_settings()


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configura el registro raíz con el nivel indicado en la configuración."""

    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
