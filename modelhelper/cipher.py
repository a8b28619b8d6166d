"""AES-CFB encryption keyed by the MD5 digest of a passphrase."""

from __future__ import annotations

import hashlib
import os
from typing import BinaryIO

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

BLOCK_SIZE = 16


def _cipher(key: str, iv: bytes) -> Cipher:
    digest = hashlib.md5(key.encode("utf-8")).digest()
    return Cipher(algorithms.AES(digest), modes.CFB(iv))


class EncryptingWriter:
    """Encrypts everything written to it before passing it on to a stream."""

    def __init__(self, stream: BinaryIO, key: str, iv: bytes) -> None:
        self._stream = stream
        self._encryptor = _cipher(key, iv).encryptor()

    def write(self, data: bytes) -> int:
        self._stream.write(self._encryptor.update(data))
        return len(data)


class DecryptingReader:
    """Decrypts what it reads from an underlying stream."""

    def __init__(self, stream: BinaryIO, key: str, iv: bytes) -> None:
        self._stream = stream
        self._decryptor = _cipher(key, iv).decryptor()

    def read(self, size: int = -1) -> bytes:
        return self._decryptor.update(self._stream.read(size))


def encrypt(key: str, plaintext: str) -> str:
    """Encrypt ``plaintext`` and return the hex of the IV followed by the ciphertext."""
    iv = os.urandom(BLOCK_SIZE)
    encryptor = _cipher(key, iv).encryptor()
    body = encryptor.update(plaintext.encode("utf-8")) + encryptor.finalize()
    return (iv + body).hex()


def decrypt(key: str, cipher_hex: str) -> str:
    """Decrypt the hex produced by :func:`encrypt`; raises ValueError on bad input."""
    data = bytes.fromhex(cipher_hex)
    if len(data) < BLOCK_SIZE:
        raise ValueError("encrypt: cipher too short")
    iv, body = data[:BLOCK_SIZE], data[BLOCK_SIZE:]
    decryptor = _cipher(key, iv).decryptor()
    plain = decryptor.update(body) + decryptor.finalize()
    return plain.decode("utf-8", errors="replace")


def encrypt_writer(key: str, stream: BinaryIO) -> EncryptingWriter:
    """Write a fresh IV to ``stream`` and return a writer that encrypts onto it."""
    iv = os.urandom(BLOCK_SIZE)
    written = stream.write(iv)
    if written is not None and written != len(iv):
        raise ValueError("encrypt: unable to write full iv to writer")
    return EncryptingWriter(stream, key, iv)


def decrypt_reader(key: str, stream: BinaryIO) -> DecryptingReader:
    """Read the IV from ``stream`` and return a reader that decrypts the rest."""
    iv = stream.read(BLOCK_SIZE)
    if iv is None or len(iv) < BLOCK_SIZE:
        raise ValueError("encrypt: unable to read the full iv")
    return DecryptingReader(stream, key, iv)