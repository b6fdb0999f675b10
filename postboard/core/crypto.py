"""
Postboard Cryptography Module

Handles post password hashing and verification (Argon2id).
"""

import logging

from argon2 import PasswordHasher, Type
from argon2.exceptions import InvalidHashError, VerificationError

logger = logging.getLogger(__name__)


class CryptoManager:
    """
    Guards mutations of a post with the password it was created with.

    Passwords are stored as Argon2id hash strings that embed their own
    salt and parameters; plaintext is never stored.
    """

    SALT_LENGTH = 16
    HASH_LENGTH = 32

    def __init__(
        self,
        time_cost: int = 3,
        memory_cost_kb: int = 65536,  # 64MB
        parallelism: int = 1
    ):
        """
        Initialize crypto manager with Argon2id parameters.

        Args:
            time_cost: Number of iterations (higher = slower + more secure)
            memory_cost_kb: Memory usage in KB
            parallelism: Number of parallel threads
        """
        self.time_cost = time_cost
        self.memory_cost_kb = memory_cost_kb
        self.parallelism = parallelism

        self._hasher = PasswordHasher(
            time_cost=time_cost,
            memory_cost=memory_cost_kb,
            parallelism=parallelism,
            hash_len=self.HASH_LENGTH,
            salt_len=self.SALT_LENGTH,
            type=Type.ID
        )

        logger.debug(
            f"CryptoManager initialized: time={time_cost}, "
            f"memory={memory_cost_kb}KB, parallelism={parallelism}"
        )

    def hash_password(self, password: str) -> str:
        """
        Hash a password using Argon2id.

        Returns the full Argon2 hash string including parameters and salt.
        """
        return self._hasher.hash(password)

    def verify_password(self, password: str, hash_str: str) -> bool:
        """
        Verify a password against an Argon2id hash.

        Returns True if password matches, False otherwise. An empty
        password or a stored value that is not an Argon2 hash never
        matches.
        """
        if not password or not hash_str:
            return False

        try:
            return self._hasher.verify(hash_str, password)
        except VerificationError:
            return False
        except InvalidHashError:
            logger.warning("Stored password is not a valid Argon2 hash")
            return False

    def needs_rehash(self, hash_str: str) -> bool:
        """True when the hash was made with other parameters than ours."""
        try:
            return self._hasher.check_needs_rehash(hash_str)
        except InvalidHashError:
            return True
