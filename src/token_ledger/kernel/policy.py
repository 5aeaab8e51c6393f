"""
Ledger Policy - Configuration parameters for a ledger instance

The LedgerPolicy fixes the numeric width of balances and the logging
behaviour of a ledger. A policy is chosen once, at construction, and
cannot change for the lifetime of the ledger.
"""

from pydantic import BaseModel, Field


class LedgerPolicy(BaseModel):
    """
    Ledger configuration parameters

    The defaults reproduce a 64-bit unsigned balance, the width every
    amount, balance, allowance and total supply must fit in.
    """

    policy_version: str = Field(
        default="1.0",
        description="Policy version for tracking changes over time",
    )

    balance_bits: int = Field(
        default=64,
        ge=1,
        le=256,
        description="Width in bits of an unsigned balance",
    )

    log_mutations: bool = Field(
        default=True,
        description="Emit a debug log record for every successful mutation",
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "description": "Numeric width and logging parameters for a token ledger"
        },
    }

    def max_balance(self) -> int:
        """Largest representable balance under this policy"""
        return (1 << self.balance_bits) - 1

    def is_representable(self, amount: object) -> bool:
        """
        Check whether a value is a valid balance under this policy

        Args:
            amount: Candidate balance or amount

        Returns:
            True if amount is a non-bool int in 0..max_balance()
        """
        if isinstance(amount, bool) or not isinstance(amount, int):
            return False
        return 0 <= amount <= self.max_balance()


# Default global policy instance
default_ledger_policy = LedgerPolicy()
