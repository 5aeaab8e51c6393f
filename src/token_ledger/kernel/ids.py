"""
Ledger instance identifiers

Each Ledger gets a short random id that is bound into its log records,
so output from several ledgers in one process can be told apart.
"""

import secrets
from typing import Protocol


class IdFactory(Protocol):
    """Protocol for ID generation strategies"""

    def generate(self) -> str:
        """Generate a new unique ID"""
        ...


def generate_ledger_id() -> str:
    """
    Generate a ledger identifier using cryptographic randomness

    Returns:
        16-character URL-safe string (96 bits of entropy)
    """
    return secrets.token_urlsafe(12)


class DefaultIdFactory:
    """Default ID factory using random URL-safe tokens"""

    def generate(self) -> str:
        return generate_ledger_id()


# Global default factory
default_id_factory = DefaultIdFactory()
