# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de utilidades criptográficas del paquete cryptocore.
# --------------------------------------------------------------
"""Inicializa el paquete `cryptocore` y documenta sus módulos principales."""

__all__ = [
    "codec",
    "config",
    "crypto_rsa",
    "crypto_sign",
    "crypto_sym",
    "errors",
    "models",
    "rng",
]
