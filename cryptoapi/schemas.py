# --------------------------------------------------------------
# File: schemas.py
# Description: Esquemas Pydantic de peticiones y respuestas de los comandos.
# --------------------------------------------------------------
"""Modelos de la frontera de comandos: todo valor binario viaja en Base64."""

from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictInt, StrictStr

from cryptocore.codec import KeyEncoding
from cryptocore.errors import ErrorKind


def _alias(name: str) -> AliasChoices:
    # Acepta tanto `public_key` como `public_key_b64`.
    return AliasChoices(name, f"{name}_b64")


class CommandRequest(BaseModel):
    """Petición base sin campos."""

    model_config = ConfigDict(frozen=True)


class RsaKeygenRequest(CommandRequest):
    bits: StrictInt


class RsaEncryptRequest(CommandRequest):
    plaintext: StrictStr = Field(repr=False)
    public_key: StrictStr = Field(validation_alias=_alias("public_key"), repr=False)


class RsaDecryptRequest(CommandRequest):
    ciphertext: StrictStr = Field(validation_alias=_alias("ciphertext"))
    private_key: StrictStr = Field(validation_alias=_alias("private_key"), repr=False)


class Ed25519SignRequest(CommandRequest):
    message: StrictStr = Field(repr=False)
    private_key: StrictStr = Field(validation_alias=_alias("private_key"), repr=False)


class Ed25519VerifyRequest(CommandRequest):
    message: StrictStr = Field(repr=False)
    signature: StrictStr = Field(validation_alias=_alias("signature"))
    public_key: StrictStr = Field(validation_alias=_alias("public_key"))


class AesEncryptRequest(CommandRequest):
    """Cifrado AES-256-GCM.

    Attributes:
        plaintext (str): Texto a cifrar, convertido a UTF-8.
        key (str): Clave de 32 bytes en la forma indicada por ``key_encoding``.
        nonce (str): Nonce de 12 bytes en la misma forma que la clave.
        key_encoding (Optional[KeyEncoding]): ``text`` o ``base64``; si se
            omite se usa el valor configurado.

    """

    plaintext: StrictStr = Field(repr=False)
    key: StrictStr = Field(repr=False)
    nonce: StrictStr
    key_encoding: Optional[KeyEncoding] = None


class AesDecryptRequest(CommandRequest):
    ciphertext: StrictStr = Field(validation_alias=_alias("ciphertext"))
    key: StrictStr = Field(repr=False)
    nonce: StrictStr
    key_encoding: Optional[KeyEncoding] = None


class KeyPairResponse(BaseModel):
    """Par de claves codificado en Base64 para el llamante."""

    public_key: str
    private_key: str = Field(repr=False)


class ErrorPayload(BaseModel):
    """Error de dominio con tipo estable y mensaje no sensible."""

    kind: ErrorKind
    message: str


class CommandResponse(BaseModel):
    """Resultado de una llamada a la fachada.

    Attributes:
        command (str): Nombre del comando solicitado, tal cual se recibió.
        ok (bool): ``True`` si la llamada terminó con éxito.
        result (Any): Valor devuelto por el comando cuando ``ok`` es verdadero.
        error (Optional[ErrorPayload]): Descripción del fallo cuando ``ok`` es
            falso.

    """

    command: str
    ok: bool
    result: Any = Field(default=None, repr=False)
    error: Optional[ErrorPayload] = None
