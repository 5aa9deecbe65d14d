"""
Password hashing helpers.

bcrypt with a per-hash salt; cost factor 10.
"""

from functools import lru_cache

import bcrypt

BCRYPT_ROUNDS = 10


def hash_password(plain: str) -> str:
    """Hash a plaintext password, returning the 60-char bcrypt string"""
    return bcrypt.hashpw(plain.encode("utf-8"), bcrypt.gensalt(BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return hash_password("dummy_password")


def burn_verification_time(plain: str) -> None:
    """Run one bcrypt comparison against a throwaway hash (unknown-user login path)"""
    verify_password(plain, _dummy_hash())
