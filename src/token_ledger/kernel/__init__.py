"""
Kernel - Shared infrastructure for the ledger

Errors, configuration policy, identifiers, structured logging and metrics.
The ledger module builds on these and nothing here depends on the ledger.
"""

from token_ledger.kernel.errors import (
    BalanceOverflow,
    InsufficientAllowance,
    InsufficientBalance,
    InvalidAmount,
    SelfApproval,
    SelfTransfer,
    TokenError,
    ZeroAmount,
)
from token_ledger.kernel.ids import IdFactory, generate_ledger_id
from token_ledger.kernel.policy import LedgerPolicy, default_ledger_policy

__all__ = [
    # IDs
    "IdFactory",
    "generate_ledger_id",
    # Policy
    "LedgerPolicy",
    "default_ledger_policy",
    # Errors
    "TokenError",
    "SelfTransfer",
    "ZeroAmount",
    "InsufficientBalance",
    "BalanceOverflow",
    "SelfApproval",
    "InsufficientAllowance",
    "InvalidAmount",
]
