"""
Ledger Invariants - Validation gates for transfers and approvals

These pure functions enforce the ledger's constraints. Each either returns
silently or raises a TokenError; none of them touch ledger state. The Ledger
runs them in a fixed order before any write, so a rejected operation leaves
state unchanged and the first failing gate decides the error:

transfer:       distinct parties, nonzero amount, balance, overflow
transfer_from:  distinct parties, nonzero amount, allowance, balance, overflow
approve:        distinct parties
"""

from token_ledger.kernel.errors import (
    BalanceOverflow,
    InsufficientAllowance,
    InsufficientBalance,
    InvalidAmount,
    SelfApproval,
    SelfTransfer,
    ZeroAmount,
)
from token_ledger.kernel.policy import LedgerPolicy


def validate_representable(amount: object, policy: LedgerPolicy) -> None:
    """
    Ensure a value is a balance the policy can represent

    Args:
        amount: Candidate amount
        policy: Ledger policy fixing the balance width

    Raises:
        InvalidAmount: If amount is not an int in 0..max_balance
    """
    if not policy.is_representable(amount):
        raise InvalidAmount(amount=amount, max_balance=policy.max_balance())


def validate_distinct_parties(from_address: str, to_address: str) -> None:
    """
    Gate 1 (transfers): sender and recipient must differ

    Raises:
        SelfTransfer: If both addresses are equal
    """
    if from_address == to_address:
        raise SelfTransfer(address=from_address)


def validate_nonzero_amount(amount: int) -> None:
    """
    Gate 2 (transfers): zero-token transfers are rejected

    Raises:
        ZeroAmount: If amount is zero
    """
    if amount == 0:
        raise ZeroAmount()


def validate_sufficient_allowance(allowance: int, amount: int) -> None:
    """
    Gate 3 (transfer_from only): spender must be allowed to move amount

    Runs before the balance gate, so an under-allowed spender gets
    InsufficientAllowance even when the owner is also short of funds.

    Args:
        allowance: Remaining allowance of (owner, spender)
        amount: Requested amount

    Raises:
        InsufficientAllowance: If allowance < amount
    """
    if allowance < amount:
        raise InsufficientAllowance(required=amount, available=allowance)


def validate_sufficient_balance(balance: int, amount: int) -> None:
    """
    Gate: sender must hold at least amount

    Args:
        balance: Sender's current balance
        amount: Requested amount

    Raises:
        InsufficientBalance: If balance < amount
    """
    if balance < amount:
        raise InsufficientBalance(required=amount, available=balance)


def validate_no_overflow(
    to_address: str, balance: int, amount: int, policy: LedgerPolicy
) -> int:
    """
    Gate: recipient's new balance must fit the balance width

    Args:
        to_address: Recipient address
        balance: Recipient's current balance
        amount: Amount to credit
        policy: Ledger policy fixing the balance width

    Returns:
        The recipient's balance after crediting amount

    Raises:
        BalanceOverflow: If balance + amount > max_balance
    """
    max_balance = policy.max_balance()
    new_balance = balance + amount
    if new_balance > max_balance:
        raise BalanceOverflow(
            address=to_address,
            balance=balance,
            amount=amount,
            max_balance=max_balance,
        )
    return new_balance


def validate_distinct_approval_parties(owner: str, spender: str) -> None:
    """
    Gate 1 (approve): owner cannot approve itself

    Raises:
        SelfApproval: If owner and spender are equal
    """
    if owner == spender:
        raise SelfApproval(address=owner)
