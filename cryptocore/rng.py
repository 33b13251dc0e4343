# --------------------------------------------------------------
# File: rng.py
# Description: Fuente de aleatoriedad criptográfica compartida por el proceso.
# --------------------------------------------------------------
"""Generador aleatorio seguro expuesto como singleton seguro entre hilos."""

import os
import threading
from typing import Optional

__all__ = ["SecureRandom", "get_secure_random"]


class SecureRandom:
    """Envoltorio sobre el CSPRNG del sistema operativo.

    ``os.urandom`` no guarda estado propio en el proceso, por lo que varias
    extracciones concurrentes no necesitan coordinación.
    """

    def token_bytes(self, size: int) -> bytes:
        """Devuelve ``size`` bytes aleatorios.

        Args:
            size (int): Número de bytes solicitados, mayor o igual que cero.

        Returns:
            bytes: Bytes procedentes del CSPRNG del sistema.

        Raises:
            ValueError: Si ``size`` es negativo.

        """

        if size < 0:
            raise ValueError("size must be non-negative")
        return os.urandom(size)


_instance: Optional[SecureRandom] = None
_lock = threading.Lock()


def get_secure_random() -> SecureRandom:
    """Devuelve la instancia única, creándola en el primer uso."""

    global _instance
    if _instance is None:
        with _lock:
            if _instance is None:
                _instance = SecureRandom()
    return _instance
