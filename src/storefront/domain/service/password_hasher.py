"""Domain service interface: one-way password hashing."""

from __future__ import annotations

from abc import ABC, abstractmethod


class PasswordHasher(ABC):

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return a salted, irreversible hash of *password*."""

    @abstractmethod
    def verify(self, password: str, credential_hash: str) -> bool:
        """True if *password* produces *credential_hash*.

        Must return False, not raise, for a malformed stored hash.
        """
