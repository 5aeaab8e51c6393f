"""
Token Ledger - In-memory fungible token ledger

Tracks per-address balances, a fixed total supply and delegated spending
allowances. Every operation either applies completely or raises a
TokenError and leaves the ledger untouched.

Fun fact: Luca Pacioli described double-entry bookkeeping in 1494 - every
debit has a matching credit, which is exactly why total supply never moves.
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
from token_ledger.kernel.policy import LedgerPolicy
from token_ledger.ledger import Ledger, LedgerSnapshot

__version__ = "0.1.0"
__all__ = [
    "Ledger",
    "LedgerSnapshot",
    "LedgerPolicy",
    "TokenError",
    "SelfTransfer",
    "ZeroAmount",
    "InsufficientBalance",
    "BalanceOverflow",
    "SelfApproval",
    "InsufficientAllowance",
    "InvalidAmount",
    "__version__",
]
