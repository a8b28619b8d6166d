"""An encrypted key/value store kept in a single file."""

from __future__ import annotations

import json
import os
import threading

from modelhelper.cipher import decrypt_reader, encrypt_writer


class Vault:
    """Secrets stored as encrypted JSON; every access reloads the file."""

    def __init__(self, encoding_key: str, path: str | os.PathLike[str]) -> None:
        self._encoding_key = encoding_key
        self._path = os.fspath(path)
        self._lock = threading.Lock()
        self._values: dict[str, str] = {}

    def _load(self) -> None:
        try:
            handle = open(self._path, "rb")
        except OSError:
            self._values = {}
            return
        with handle:
            text = decrypt_reader(self._encoding_key, handle).read().decode("utf-8")
        value, _ = json.JSONDecoder().raw_decode(text.lstrip())
        if value is None:
            value = {}
        if not isinstance(value, dict):
            raise ValueError("secret: vault file does not hold a JSON object")
        self._values = value

    def _save(self) -> None:
        fd = os.open(self._path, os.O_RDWR | os.O_CREAT | os.O_TRUNC, 0o755)
        with os.fdopen(fd, "wb") as handle:
            writer = encrypt_writer(self._encoding_key, handle)
            payload = json.dumps(self._values, sort_keys=True, separators=(",", ":"))
            writer.write((payload + "\n").encode("utf-8"))

    def get(self, key: str) -> str:
        """Return the value for ``key``; raises KeyError when there is none."""
        with self._lock:
            self._load()
            try:
                return self._values[key]
            except KeyError:
                raise KeyError("secret: no value for that key") from None

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key`` and write the vault back to disk."""
        with self._lock:
            self._load()
            self._values[key] = value
            self._save()


def file(encoding_key: str, path: str | os.PathLike[str]) -> Vault:
    """Open a vault backed by the file at ``path``."""
    return Vault(encoding_key, path)