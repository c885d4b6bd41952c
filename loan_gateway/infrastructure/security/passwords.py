"""bcrypt implementation of PasswordHasher."""

from functools import lru_cache
from typing import Optional

import bcrypt
from starlette.concurrency import run_in_threadpool

from loan_gateway.domain.interfaces import PasswordHasher

# bcrypt only considers the first 72 bytes of a password.
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


@lru_cache
def _placeholder_hash(rounds: int) -> bytes:
    """A hash no submitted password is checked for real, at the given cost."""
    return bcrypt.hashpw(b"placeholder-password", bcrypt.gensalt(rounds=rounds))


class BcryptPasswordHasher(PasswordHasher):
    """
    Salted bcrypt hashing with a fixed cost factor.

    Hashing is deliberately slow, so both operations run in a worker
    thread to keep the event loop free. Verifying without a stored hash
    runs against a placeholder hash of the same cost, so an unknown
    account takes as long to reject as a wrong password.
    """

    def __init__(self, rounds: int = 10):
        self._rounds = rounds

    async def hash(self, password: str) -> str:
        return await run_in_threadpool(self._hash_sync, password)

    async def verify(self, password: str, password_hash: Optional[str]) -> bool:
        return await run_in_threadpool(self._verify_sync, password, password_hash)

    def _hash_sync(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(_encode(password), salt).decode("utf-8")

    def _verify_sync(self, password: str, password_hash: Optional[str]) -> bool:
        if password_hash is None:
            bcrypt.checkpw(_encode(password), _placeholder_hash(self._rounds))
            return False

        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt hash
            return False
