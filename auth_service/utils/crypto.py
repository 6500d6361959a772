"""
AES-CBC encryption helpers.

The IV is the first block of the key itself, so encryption is deterministic:
the same plaintext under the same key always yields the same ciphertext.
Existing ciphertexts depend on this, keep it in mind before changing it.
"""
import base64
import binascii
from enum import Enum
from typing import Union

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ..config import settings
from ..errors import DecodeError, InvalidKey, UnknownEncodingError
from .padding import pad, unpad

AES_BLOCK_SIZE = algorithms.AES.block_size // 8
AES_KEY_SIZES = (16, 24, 32)


class Encoding(Enum):
    STANDARD = "standard"
    URL_SAFE = "url_safe"


def _b64encode(raw: bytes, encoding: Encoding) -> str:
    if encoding is Encoding.STANDARD:
        return base64.b64encode(raw).decode("ascii")
    if encoding is Encoding.URL_SAFE:
        return base64.urlsafe_b64encode(raw).decode("ascii")
    raise UnknownEncodingError(f"unknown encoding {encoding!r}")


def _b64decode(text: Union[str, bytes], encoding: Encoding) -> bytes:
    if encoding is Encoding.STANDARD:
        altchars = None
    elif encoding is Encoding.URL_SAFE:
        altchars = b"-_"
    else:
        raise UnknownEncodingError(f"unknown encoding {encoding!r}")

    try:
        return base64.b64decode(text, altchars=altchars, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"input is not valid base64: {e}") from e


class AESCipher:
    """AES in CBC mode keyed (and IV'd) by a fixed secret."""

    def __init__(self, key: Union[str, bytes]):
        if isinstance(key, str):
            key = key.encode("utf-8")
        # algorithms.AES also takes 64 byte keys, which only XTS mode accepts
        if len(key) not in AES_KEY_SIZES:
            raise InvalidKey(f"AES key must be 16, 24 or 32 bytes, got {len(key)}")
        self._algorithm = algorithms.AES(key)
        self._iv = key[:AES_BLOCK_SIZE]

    def _cipher(self) -> Cipher:
        return Cipher(self._algorithm, modes.CBC(self._iv))

    def encrypt(self, plaintext: Union[str, bytes], encoding: Encoding = Encoding.STANDARD) -> str:
        if isinstance(plaintext, str):
            plaintext = plaintext.encode("utf-8")
        if not isinstance(encoding, Encoding):
            raise UnknownEncodingError(f"unknown encoding {encoding!r}")

        encryptor = self._cipher().encryptor()
        encrypted = encryptor.update(pad(plaintext, AES_BLOCK_SIZE)) + encryptor.finalize()
        return _b64encode(encrypted, encoding)

    def decrypt(self, text: Union[str, bytes], encoding: Encoding = Encoding.STANDARD) -> bytes:
        encrypted = _b64decode(text, encoding)
        if len(encrypted) % AES_BLOCK_SIZE:
            raise DecodeError(
                f"ciphertext length {len(encrypted)} is not a multiple of {AES_BLOCK_SIZE}"
            )

        decryptor = self._cipher().decryptor()
        origin = decryptor.update(encrypted) + decryptor.finalize()
        return unpad(origin, AES_BLOCK_SIZE)


def encrypt(plaintext: Union[str, bytes], encoding: Encoding = Encoding.STANDARD) -> str:
    """Encrypt with the configured CRYPTO_KEY."""
    return AESCipher(settings.CRYPTO_KEY).encrypt(plaintext, encoding)


def decrypt(text: Union[str, bytes], encoding: Encoding = Encoding.STANDARD) -> bytes:
    """Decrypt with the configured CRYPTO_KEY."""
    return AESCipher(settings.CRYPTO_KEY).decrypt(text, encoding)
