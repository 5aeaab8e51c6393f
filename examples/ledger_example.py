"""
Ledger Examples - Walkthrough of transfers and delegated spending

This example demonstrates:
- Creating a ledger with a fixed supply
- Direct transfers and the rejections they can produce
- Approvals and allowance-gated transfer_from
- Snapshots for inspecting state
"""

from token_ledger import (
    InsufficientAllowance,
    InsufficientBalance,
    Ledger,
    SelfTransfer,
)


def example_1_direct_transfers():
    """
    Example 1: Direct Transfers

    Demonstrates:
    - Creator receives the whole supply
    - Transfers move tokens, total supply never changes
    - Rejected transfers leave balances untouched
    """
    print("\n=== Example 1: Direct Transfers ===\n")

    ledger = Ledger.new("alice", 1000)
    print(f"alice: {ledger.balance_of('alice')}, bob: {ledger.balance_of('bob')}")

    ledger.transfer("alice", "bob", 100)
    print("Transferred 100 from alice to bob")
    print(f"alice: {ledger.balance_of('alice')}, bob: {ledger.balance_of('bob')}")
    print(f"Total supply: {ledger.total_supply()}")

    try:
        ledger.transfer("bob", "carol", 500)
    except InsufficientBalance as e:
        print(f"✗ Rejected: {e}")

    try:
        ledger.transfer("alice", "alice", 10)
    except SelfTransfer as e:
        print(f"✗ Rejected: {e}")


def example_2_delegated_spending():
    """
    Example 2: Delegated Spending

    Demonstrates:
    - Owner approves a spender
    - Spender moves tokens to a third party
    - Allowance is consumed and cannot be exceeded
    """
    print("\n=== Example 2: Delegated Spending ===\n")

    ledger = Ledger.new("alice", 1000)
    ledger.approve("alice", "bob", 100)
    print(f"bob may spend {ledger.allowance('alice', 'bob')} of alice's tokens")

    ledger.transfer_from("bob", "alice", "charlie", 50)
    print("bob sent 50 of alice's tokens to charlie")
    print(f"Remaining allowance: {ledger.allowance('alice', 'bob')}")

    try:
        ledger.transfer_from("bob", "alice", "charlie", 100)
    except InsufficientAllowance as e:
        print(f"✗ Rejected: {e}")

    snapshot = ledger.snapshot()
    print(f"\nSnapshot balances: {snapshot.balances}")
    print(f"Balanced: {snapshot.is_balanced()}")


if __name__ == "__main__":
    print("=" * 70)
    print("Token Ledger - Examples")
    print("=" * 70)

    example_1_direct_transfers()
    example_2_delegated_spending()

    print("\n" + "=" * 70)
    print("✓ All examples completed successfully!")
    print("=" * 70)
