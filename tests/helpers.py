"""
Test Helper Functions - Builders and Assertions

Reusable builders for ledgers in specific states and assertions over
snapshots, so individual tests stay short.
"""

from token_ledger.kernel.policy import LedgerPolicy
from token_ledger.ledger.models import LedgerSnapshot
from token_ledger.ledger.state import Ledger


class FixedIdFactory:
    """ID factory returning a predictable sequence of ledger ids"""

    def __init__(self, prefix: str = "ledger") -> None:
        self.prefix = prefix
        self.count = 0

    def generate(self) -> str:
        self.count += 1
        return f"{self.prefix}-{self.count}"


def mint_for_test(ledger: Ledger, address: str, amount: int) -> None:
    """
    Write a raw balance, bypassing every gate

    Breaks conservation on purpose: the only way to put an address near
    the balance width while another address still holds tokens.

    Args:
        ledger: Ledger to modify
        address: Address to overwrite
        amount: New raw balance
    """
    ledger._balances[address] = amount


def build_funded_ledger(
    balances: dict[str, int],
    policy: LedgerPolicy | None = None,
) -> Ledger:
    """
    Builder for a conserving ledger with several funded addresses

    The first address is the creator and receives the whole supply,
    which is then handed out with regular transfers.

    Args:
        balances: Address -> desired balance (first entry is the creator)
        policy: Optional ledger policy

    Returns:
        Ledger whose balances match the request and whose supply is their sum

    Example:
        >>> ledger = build_funded_ledger({"alice": 600, "bob": 400})
        >>> ledger.total_supply()
        1000
    """
    creator, *others = balances
    ledger = Ledger(
        creator, sum(balances.values()), policy=policy, id_factory=FixedIdFactory()
    )
    for address in others:
        if balances[address]:
            ledger.transfer(creator, address, balances[address])
    return ledger


def assert_snapshot_unchanged(before: LedgerSnapshot, ledger: Ledger) -> None:
    """Assert ledger state is identical to an earlier snapshot"""
    after = ledger.snapshot()
    assert after.balances == before.balances
    assert after.allowances == before.allowances
    assert after.total_supply == before.total_supply
