from __future__ import annotations

import asyncio
import base64
import hashlib

import bcrypt


class BcryptHasher:
    """Salted bcrypt password hashes.

    bcrypt only reads the first 72 bytes of its input, so the password is
    pre-hashed with SHA-256 and base64-encoded before hashing.
    """

    def __init__(self, rounds: int = 12) -> None:
        self._rounds = rounds

    async def hash(self, password: str) -> str:
        return await asyncio.to_thread(self._hash, password)

    async def verify(self, password: str, password_hash: str) -> bool:
        return await asyncio.to_thread(self._verify, password, password_hash)

    def _hash(self, password: str) -> str:
        hashed = bcrypt.hashpw(_prehash(password), bcrypt.gensalt(rounds=self._rounds))
        return hashed.decode("ascii")

    @staticmethod
    def _verify(password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(_prehash(password), password_hash.encode("ascii"))
        except ValueError:
            # Stored value is not a bcrypt hash.
            return False


def _prehash(password: str) -> bytes:
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())
