"""
Ledger Domain Models - Value types and snapshots

Addresses are str and balances are int at runtime; the NewTypes below
document intent in signatures. Snapshots are frozen pydantic models
that copy ledger state out for inspection and comparison.

Key concepts:
- Address: string account identifier, compared by equality only
- Balance: non-negative integer bounded by the policy width
- Conservation: sum of all balances equals total supply, always
"""

from typing import NewType

from pydantic import BaseModel, Field

Address = NewType("Address", str)
Balance = NewType("Balance", int)


class AllowanceEntry(BaseModel):
    """
    Remaining amount a spender may move out of an owner's balance

    Attributes:
        owner: Address whose balance is spent
        spender: Address authorized to spend it
        amount: Remaining allowance
    """

    owner: str
    spender: str
    amount: int = Field(ge=0)

    model_config = {"frozen": True}


class LedgerSnapshot(BaseModel):
    """
    Point-in-time copy of a ledger's state

    Balances contain only addresses that were ever credited (a key holding
    zero is possible). Allowances are sorted by (owner, spender) so two
    snapshots of equal state compare equal.

    Attributes:
        ledger_id: Identifier of the ledger the snapshot was taken from
        total_supply: Supply fixed at construction
        balances: Address -> balance
        allowances: Recorded allowance entries
    """

    ledger_id: str
    total_supply: int = Field(ge=0)
    balances: dict[str, int] = Field(default_factory=dict)
    allowances: list[AllowanceEntry] = Field(default_factory=list)

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "ledger_id": "k3J9x_2mQpLr8TfA",
                    "total_supply": 1000,
                    "balances": {"alice": 950, "charlie": 50},
                    "allowances": [
                        {"owner": "alice", "spender": "bob", "amount": 50}
                    ],
                }
            ]
        },
    }

    def total_balance(self) -> int:
        """Sum of all recorded balances"""
        return sum(self.balances.values())

    def is_balanced(self) -> bool:
        """Check conservation (sum of balances = total supply)"""
        return self.total_balance() == self.total_supply

    def balance_of(self, address: str) -> int:
        """Balance of an address in this snapshot, 0 if never credited"""
        return self.balances.get(address, 0)

    def allowance(self, owner: str, spender: str) -> int:
        """Allowance for (owner, spender) in this snapshot, 0 if never set"""
        for entry in self.allowances:
            if entry.owner == owner and entry.spender == spender:
                return entry.amount
        return 0
