"""
Ledger State Machine - Balances, allowances and fixed total supply

The Ledger is the single aggregate of this package. Every mutating
operation follows the same two phases:

1. Validate: run the invariant gates in order against current state
2. Apply: write the precomputed new values

Nothing is written until every gate has passed, so a rejected call
leaves balances and allowances exactly as they were.

The Ledger is not thread-safe; callers sharing one must serialize
mutating calls.
"""

from token_ledger.kernel.ids import IdFactory, default_id_factory
from token_ledger.kernel.logging import get_logger, loggable_context
from token_ledger.kernel.metrics import track_operation
from token_ledger.kernel.policy import LedgerPolicy, default_ledger_policy
from token_ledger.ledger.invariants import (
    validate_distinct_approval_parties,
    validate_distinct_parties,
    validate_no_overflow,
    validate_nonzero_amount,
    validate_representable,
    validate_sufficient_allowance,
    validate_sufficient_balance,
)
from token_ledger.ledger.models import (
    Address,
    AllowanceEntry,
    Balance,
    LedgerSnapshot,
)

logger = get_logger(__name__)


class Ledger:
    """
    In-memory fungible token ledger

    Holds per-address balances, (owner, spender) allowances and a total
    supply fixed at construction. The sum of all balances equals the
    total supply after every call, successful or not.

    Addresses are strings. Any str is accepted and compared by equality
    only; snapshots key and sort on them, so other hashables are not
    supported.

    Example:
        >>> ledger = Ledger.new("alice", 1000)
        >>> ledger.transfer("alice", "bob", 100)
        >>> ledger.balance_of("bob")
        100
    """

    def __init__(
        self,
        creator: Address,
        initial_supply: Balance,
        policy: LedgerPolicy | None = None,
        id_factory: IdFactory | None = None,
    ) -> None:
        """
        Create a ledger with the whole supply credited to creator

        Args:
            creator: Address receiving the initial supply
            initial_supply: Total supply, zero is allowed
            policy: Balance width and logging parameters
            id_factory: Source of the ledger id attached to log records

        Raises:
            InvalidAmount: If initial_supply is not representable
        """
        self.policy = policy if policy is not None else default_ledger_policy
        validate_representable(initial_supply, self.policy)

        self.ledger_id = (id_factory or default_id_factory).generate()
        # The creator gets a key even for a zero supply.
        self._balances: dict[Address, Balance] = {creator: initial_supply}
        self._allowances: dict[tuple[Address, Address], Balance] = {}
        self._total_supply = initial_supply

        logger.info(
            "Ledger created",
            ledger_id=self.ledger_id,
            balance_bits=self.policy.balance_bits,
            **loggable_context(
                {"creator": creator, "initial_supply": initial_supply}
            ),
        )

    @classmethod
    def new(
        cls,
        creator: Address,
        initial_supply: Balance,
        policy: LedgerPolicy | None = None,
        id_factory: IdFactory | None = None,
    ) -> "Ledger":
        """Create a ledger with exactly one funded address"""
        return cls(creator, initial_supply, policy=policy, id_factory=id_factory)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def total_supply(self) -> Balance:
        """Supply fixed at construction"""
        return self._total_supply

    def balance_of(self, address: Address) -> Balance:
        """Balance of address, 0 if it was never credited"""
        return self._balances.get(address, Balance(0))

    def allowance(self, owner: Address, spender: Address) -> Balance:
        """Remaining amount spender may move from owner, 0 if never approved"""
        return self._allowances.get((owner, spender), Balance(0))

    def is_balanced(self) -> bool:
        """Check conservation (sum of balances = total supply)"""
        return sum(self._balances.values()) == self._total_supply

    def snapshot(self) -> LedgerSnapshot:
        """Copy current state into an immutable snapshot"""
        allowances = [
            AllowanceEntry(owner=owner, spender=spender, amount=amount)
            for (owner, spender), amount in sorted(self._allowances.items())
        ]
        return LedgerSnapshot(
            ledger_id=self.ledger_id,
            total_supply=self._total_supply,
            balances=dict(self._balances),
            allowances=allowances,
        )

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    @track_operation("transfer")
    def transfer(
        self, from_address: Address, to_address: Address, amount: Balance
    ) -> None:
        """
        Move amount from from_address to to_address

        Gates, first failure wins:
        1. from_address != to_address
        2. amount != 0
        3. balance_of(from_address) >= amount
        4. balance_of(to_address) + amount fits the balance width

        Raises:
            InvalidAmount: If amount is not representable
            SelfTransfer: If sender and recipient are the same
            ZeroAmount: If amount is zero
            InsufficientBalance: If the sender holds less than amount
            BalanceOverflow: If the recipient's balance would overflow
        """
        validate_representable(amount, self.policy)
        validate_distinct_parties(from_address, to_address)
        validate_nonzero_amount(amount)

        from_balance = self.balance_of(from_address)
        validate_sufficient_balance(from_balance, amount)
        to_balance = validate_no_overflow(
            to_address, self.balance_of(to_address), amount, self.policy
        )

        self._apply_transfer(from_address, from_balance - amount, to_address, to_balance)
        self._log_mutation(
            "Transfer applied",
            from_address=from_address,
            to_address=to_address,
            amount=amount,
        )

    @track_operation("approve")
    def approve(self, owner: Address, spender: Address, amount: Balance) -> None:
        """
        Set the allowance of (owner, spender) to amount

        Overwrites any previous allowance; zero is a valid amount and
        reads the same as never having approved.

        Raises:
            InvalidAmount: If amount is not representable
            SelfApproval: If owner and spender are the same
        """
        validate_representable(amount, self.policy)
        validate_distinct_approval_parties(owner, spender)

        self._allowances[(owner, spender)] = amount
        self._log_mutation(
            "Allowance set", owner=owner, spender=spender, amount=amount
        )

    @track_operation("transfer_from")
    def transfer_from(
        self,
        spender: Address,
        from_address: Address,
        to_address: Address,
        amount: Balance,
    ) -> None:
        """
        Move amount from from_address to to_address on behalf of spender

        Consumes the allowance from_address granted to spender.

        Gates, first failure wins:
        1. from_address != to_address
        2. amount != 0
        3. allowance(from_address, spender) >= amount
        4. balance_of(from_address) >= amount
        5. balance_of(to_address) + amount fits the balance width

        Raises:
            InvalidAmount: If amount is not representable
            SelfTransfer: If sender and recipient are the same
            ZeroAmount: If amount is zero
            InsufficientAllowance: If spender is allowed less than amount
            InsufficientBalance: If the owner holds less than amount
            BalanceOverflow: If the recipient's balance would overflow
        """
        validate_representable(amount, self.policy)
        validate_distinct_parties(from_address, to_address)
        validate_nonzero_amount(amount)

        current_allowance = self.allowance(from_address, spender)
        validate_sufficient_allowance(current_allowance, amount)
        from_balance = self.balance_of(from_address)
        validate_sufficient_balance(from_balance, amount)
        to_balance = validate_no_overflow(
            to_address, self.balance_of(to_address), amount, self.policy
        )

        self._apply_transfer(from_address, from_balance - amount, to_address, to_balance)
        self._allowances[(from_address, spender)] = current_allowance - amount
        self._log_mutation(
            "Delegated transfer applied",
            spender=spender,
            from_address=from_address,
            to_address=to_address,
            amount=amount,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _apply_transfer(
        self,
        from_address: Address,
        from_balance: Balance,
        to_address: Address,
        to_balance: Balance,
    ) -> None:
        # Both values are precomputed; no check can fail between the writes.
        self._balances[from_address] = from_balance
        self._balances[to_address] = to_balance

    def _log_mutation(self, message: str, **context: object) -> None:
        if self.policy.log_mutations:
            logger.debug(
                message, ledger_id=self.ledger_id, **loggable_context(context)
            )

    def __repr__(self) -> str:
        return (
            f"Ledger(ledger_id={self.ledger_id!r}, "
            f"total_supply={self._total_supply}, "
            f"accounts={len(self._balances)})"
        )
