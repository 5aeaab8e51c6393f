"""
Custom exceptions for the token ledger

Every rejected ledger operation raises exactly one of these. The classes are
the stable outcome taxonomy callers match on; structured attributes carry the
numbers behind the rejection so callers can retry with adjusted parameters.

A raised TokenError always means the ledger was left untouched.

Fun fact: unsigned 64-bit balances top out at 18,446,744,073,709,551,615 -
roughly two tokens for every grain of sand on Earth.
"""


class TokenError(Exception):
    """Base exception for all ledger errors"""

    pass


class SelfTransfer(TokenError):
    """Raised when source and destination of a transfer are the same address"""

    def __init__(self, address: str) -> None:
        self.address = address
        super().__init__(f"Cannot transfer from {address} to itself")


class ZeroAmount(TokenError):
    """Raised when a transfer is requested for zero tokens"""

    def __init__(self) -> None:
        super().__init__("Transfer amount must be greater than zero")


class InsufficientBalance(TokenError):
    """Raised when the sender holds fewer tokens than requested"""

    def __init__(self, required: int, available: int) -> None:
        self.required = required
        self.available = available
        super().__init__(
            f"Insufficient balance: required {required}, available {available}"
        )


class BalanceOverflow(TokenError):
    """Raised when crediting the recipient would exceed the balance width"""

    def __init__(
        self, address: str, balance: int, amount: int, max_balance: int
    ) -> None:
        self.address = address
        self.balance = balance
        self.amount = amount
        self.max_balance = max_balance
        super().__init__(
            f"Crediting {amount} to {address} (balance {balance}) "
            f"would exceed maximum balance {max_balance}"
        )


class SelfApproval(TokenError):
    """Raised when an owner tries to approve itself as spender"""

    def __init__(self, address: str) -> None:
        self.address = address
        super().__init__(f"Address {address} cannot approve itself as spender")


class InsufficientAllowance(TokenError):
    """Raised when the spender's remaining allowance is below the amount"""

    def __init__(self, required: int, available: int) -> None:
        self.required = required
        self.available = available
        super().__init__(
            f"Insufficient allowance: required {required}, available {available}"
        )


class InvalidAmount(TokenError, ValueError):
    """
    Raised when an amount is not a representable balance

    Balances are non-negative integers no wider than the configured
    policy width. bool is rejected even though it subclasses int.
    """

    def __init__(self, amount: object, max_balance: int) -> None:
        self.amount = amount
        self.max_balance = max_balance
        super().__init__(
            f"Amount {amount!r} is not an integer in range 0..{max_balance}"
        )
