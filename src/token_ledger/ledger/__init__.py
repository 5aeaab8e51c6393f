"""
Ledger - Fungible token balances and delegated allowances

The Ledger tracks per-address balances under a fixed total supply and lets
owners authorize spenders to move part of their balance.
"""

from token_ledger.ledger.models import Address, AllowanceEntry, Balance, LedgerSnapshot
from token_ledger.ledger.state import Ledger

__all__ = [
    "Address",
    "Balance",
    "AllowanceEntry",
    "LedgerSnapshot",
    "Ledger",
]
