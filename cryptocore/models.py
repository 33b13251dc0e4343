# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan estructuras de intercambio criptográfico."""

from pydantic import BaseModel, ConfigDict, Field


class KeyPair(BaseModel):
    """Representa un par de claves asimétricas serializadas.

    Attributes:
        public_key (bytes): Mitad pública, apta para divulgarse.
        private_key (bytes): Mitad privada. Se excluye del ``repr`` para que
            no aparezca en trazas ni en registros.

    """

    model_config = ConfigDict(frozen=True)

    public_key: bytes
    private_key: bytes = Field(repr=False)
