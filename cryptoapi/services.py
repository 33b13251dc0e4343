# --------------------------------------------------------------
# File: services.py
# Description: Fachada de comandos que valida, despacha y traduce errores.
# --------------------------------------------------------------
"""Servicio de comandos criptográficos sin estado entre llamadas.

Cada llamada recorre los estados ``received → validated → dispatched`` y
termina en ``completed`` o ``failed``. Los fallos de dominio se devuelven como
``CommandResponse`` con ``ok=False``; los errores de programación no se
capturan.
"""

import logging
from concurrent.futures import Executor, Future
from enum import Enum
from functools import lru_cache
from typing import Any, Callable, Dict, Mapping, NamedTuple, Optional, Tuple, Type, Union

from pydantic import ValidationError

from cryptoapi.schemas import (
    AesDecryptRequest,
    AesEncryptRequest,
    CommandRequest,
    CommandResponse,
    Ed25519SignRequest,
    Ed25519VerifyRequest,
    ErrorPayload,
    KeyPairResponse,
    RsaDecryptRequest,
    RsaEncryptRequest,
    RsaKeygenRequest,
)
from cryptocore.codec import (
    b64decode,
    b64encode,
    bytes_to_text,
    decode_key_material,
    require_length,
    text_to_bytes,
)
from cryptocore.config import Settings, get_settings
from cryptocore.crypto_rsa import rsa_decrypt, rsa_encrypt, rsa_generate_keypair, validate_rsa_bits
from cryptocore.crypto_sign import (
    SIGNATURE_SIZE,
    ed25519_generate_keypair,
    ed25519_sign,
    ed25519_verify,
)
from cryptocore.crypto_sym import (
    KEY_SIZE,
    NONCE_SIZE,
    aes_gcm_decrypt,
    aes_gcm_encrypt,
    aes_generate_key,
    aes_generate_nonce,
)
from cryptocore.errors import CryptoServiceError, InvalidParameterError
from cryptocore.models import KeyPair

__all__ = [
    "COMMAND_ALIASES",
    "CallState",
    "CommandService",
    "dispatch",
    "get_service",
]

logger = logging.getLogger(__name__)

# Nombres de la tabla de comandos frente a los que invoca la interfaz.
COMMAND_ALIASES: Dict[str, str] = {
    "generate_rsa_keypair": "rsa_generate_keypair",
    "generate_ed25519_keypair": "ed25519_generate_keypair",
}


class CallState(str, Enum):
    """Estados por los que pasa una llamada."""

    RECEIVED = "received"
    VALIDATED = "validated"
    DISPATCHED = "dispatched"
    COMPLETED = "completed"
    FAILED = "failed"


class _Command(NamedTuple):
    request_model: Type[CommandRequest]
    prepare: Callable[[Any], Tuple[Any, ...]]
    run: Callable[..., Any]


def _encode_keypair(keypair: KeyPair) -> KeyPairResponse:
    return KeyPairResponse(
        public_key=b64encode(keypair.public_key),
        private_key=b64encode(keypair.private_key),
    )


def _parse_request(model: Type[CommandRequest], payload: Any) -> CommandRequest:
    """Valida la forma de la petición sin repetir nunca los valores recibidos."""

    try:
        return model.model_validate({} if payload is None else payload)
    except ValidationError as exc:
        fields = sorted(
            {".".join(str(part) for part in error["loc"]) or "payload" for error in exc.errors(include_input=False)}
        )
        raise InvalidParameterError(f"Petición inválida; revise los campos: {', '.join(fields)}.") from None


class CommandService:
    """Despachador de los comandos criptográficos.

    Attributes:
        settings (Settings): Configuración aplicada a las validaciones.

    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()
        self._commands: Dict[str, _Command] = {
            "ping": _Command(CommandRequest, lambda request: (), lambda: "pong"),
            "rsa_generate_keypair": _Command(RsaKeygenRequest, self._prepare_rsa_keygen, self._run_rsa_keygen),
            "rsa_encrypt": _Command(RsaEncryptRequest, self._prepare_rsa_encrypt, self._run_rsa_encrypt),
            "rsa_decrypt": _Command(RsaDecryptRequest, self._prepare_rsa_decrypt, self._run_rsa_decrypt),
            "ed25519_generate_keypair": _Command(
                CommandRequest, lambda request: (), lambda: _encode_keypair(ed25519_generate_keypair())
            ),
            "ed25519_sign": _Command(Ed25519SignRequest, self._prepare_ed25519_sign, self._run_ed25519_sign),
            "ed25519_verify": _Command(Ed25519VerifyRequest, self._prepare_ed25519_verify, ed25519_verify),
            "aes_encrypt": _Command(AesEncryptRequest, self._prepare_aes, self._run_aes_encrypt),
            "aes_decrypt": _Command(AesDecryptRequest, self._prepare_aes, self._run_aes_decrypt),
            "aes_generate_key": _Command(CommandRequest, lambda request: (), lambda: b64encode(aes_generate_key())),
            "aes_generate_nonce": _Command(
                CommandRequest, lambda request: (), lambda: b64encode(aes_generate_nonce())
            ),
        }

    @property
    def commands(self) -> Tuple[str, ...]:
        """Nombres canónicos y alias aceptados por ``dispatch``."""

        return tuple(sorted([*self._commands, *COMMAND_ALIASES]))

    def dispatch(self, command: str, payload: Optional[Mapping[str, Any]] = None) -> CommandResponse:
        """Ejecuta un comando y devuelve su resultado o su error de dominio.

        Args:
            command (str): Nombre del comando o uno de sus alias.
            payload (Optional[Mapping[str, Any]]): Campos de la petición.

        Returns:
            CommandResponse: Respuesta con ``ok=True`` y ``result``, o con
            ``ok=False`` y un ``error`` de la taxonomía.

        """

        self._transition(command, CallState.RECEIVED)
        try:
            entry = None
            if isinstance(command, str):
                entry = self._commands.get(COMMAND_ALIASES.get(command, command))
            if entry is None:
                raise InvalidParameterError(f"Comando desconocido: {command!r}.")
            request = _parse_request(entry.request_model, payload)
            args = entry.prepare(request)
            self._transition(command, CallState.VALIDATED)
            self._transition(command, CallState.DISPATCHED)
            result = entry.run(*args)
        except CryptoServiceError as exc:
            logger.info("command=%s state=%s kind=%s", command, CallState.FAILED.value, exc.kind.value)
            return CommandResponse(
                command=str(command),
                ok=False,
                error=ErrorPayload(kind=exc.kind, message=exc.message),
            )
        except Exception:
            logger.error("command=%s state=%s unexpected error", command, CallState.FAILED.value)
            raise
        self._transition(command, CallState.COMPLETED)
        return CommandResponse(command=command, ok=True, result=result)

    def submit(
        self, executor: Executor, command: str, payload: Optional[Mapping[str, Any]] = None
    ) -> "Future[CommandResponse]":
        """Programa ``dispatch`` en un ejecutor; basta descartar el futuro para cancelarlo."""

        return executor.submit(self.dispatch, command, payload)

    @staticmethod
    def _transition(command: str, state: CallState) -> None:
        logger.debug("command=%s state=%s", command, state.value)

    # RSA
    def _prepare_rsa_keygen(self, request: RsaKeygenRequest) -> Tuple[int]:
        validate_rsa_bits(request.bits, self.settings)
        return (request.bits,)

    def _run_rsa_keygen(self, bits: int) -> KeyPairResponse:
        return _encode_keypair(rsa_generate_keypair(bits, self.settings))

    @staticmethod
    def _prepare_rsa_encrypt(request: RsaEncryptRequest) -> Tuple[bytes, bytes]:
        public_key = b64decode(request.public_key, "public_key")
        plaintext = text_to_bytes(request.plaintext, "plaintext")
        return public_key, plaintext

    @staticmethod
    def _run_rsa_encrypt(public_key: bytes, plaintext: bytes) -> str:
        return b64encode(rsa_encrypt(public_key, plaintext))

    @staticmethod
    def _prepare_rsa_decrypt(request: RsaDecryptRequest) -> Tuple[bytes, bytes]:
        ciphertext = b64decode(request.ciphertext, "ciphertext")
        private_key = b64decode(request.private_key, "private_key")
        return private_key, ciphertext

    @staticmethod
    def _run_rsa_decrypt(private_key: bytes, ciphertext: bytes) -> str:
        return bytes_to_text(rsa_decrypt(private_key, ciphertext), "plaintext")

    # Ed25519
    @staticmethod
    def _prepare_ed25519_sign(request: Ed25519SignRequest) -> Tuple[bytes, bytes]:
        message = text_to_bytes(request.message, "message")
        private_key = b64decode(request.private_key, "private_key")
        return private_key, message

    @staticmethod
    def _run_ed25519_sign(private_key: bytes, message: bytes) -> str:
        return b64encode(ed25519_sign(private_key, message))

    @staticmethod
    def _prepare_ed25519_verify(request: Ed25519VerifyRequest) -> Tuple[bytes, bytes, bytes]:
        message = text_to_bytes(request.message, "message")
        signature = b64decode(request.signature, "signature")
        public_key = b64decode(request.public_key, "public_key")
        require_length(signature, SIGNATURE_SIZE, "signature")
        return public_key, message, signature

    # AES
    def _prepare_aes(self, request: Union[AesEncryptRequest, AesDecryptRequest]) -> Tuple[bytes, bytes, bytes]:
        encoding = request.key_encoding or self.settings.aes_key_encoding
        key = decode_key_material(request.key, encoding, "key")
        nonce = decode_key_material(request.nonce, encoding, "nonce")
        if isinstance(request, AesEncryptRequest):
            data = text_to_bytes(request.plaintext, "plaintext")
        else:
            data = b64decode(request.ciphertext, "ciphertext")
        require_length(key, KEY_SIZE, "key")
        require_length(nonce, NONCE_SIZE, "nonce")
        return key, nonce, data

    @staticmethod
    def _run_aes_encrypt(key: bytes, nonce: bytes, plaintext: bytes) -> str:
        return b64encode(aes_gcm_encrypt(key, nonce, plaintext))

    @staticmethod
    def _run_aes_decrypt(key: bytes, nonce: bytes, ciphertext: bytes) -> str:
        return bytes_to_text(aes_gcm_decrypt(key, nonce, ciphertext), "plaintext")


@lru_cache(maxsize=1)
def get_service() -> CommandService:
    """Devuelve el servicio por defecto del proceso, con la configuración global."""

    return CommandService()


def dispatch(command: str, payload: Optional[Mapping[str, Any]] = None) -> CommandResponse:
    """Atajo sobre ``get_service().dispatch`` para la capa de presentación."""

    return get_service().dispatch(command, payload)
