"""
Pytest configuration and shared fixtures

Fun fact: The name "conftest" comes from pytest's configuration testing
framework. Files named conftest.py are automatically discovered and their
fixtures are available to all tests in the same directory and subdirectories!
"""

import logging
from typing import Iterator

import pytest
import structlog

from token_ledger.kernel.policy import LedgerPolicy
from token_ledger.ledger.state import Ledger
from tests.helpers import FixedIdFactory


@pytest.fixture(autouse=True)
def _reset_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run each test in development mode and restore logging afterwards"""
    monkeypatch.delenv("ENVIRONMENT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    root = logging.getLogger()
    level = root.level
    yield
    structlog.reset_defaults()
    root.setLevel(level)


@pytest.fixture
def id_factory() -> FixedIdFactory:
    """Provide predictable ledger ids ("ledger-1", "ledger-2", ...)"""
    return FixedIdFactory()


@pytest.fixture
def ledger_policy() -> LedgerPolicy:
    """Provide default 64-bit ledger policy"""
    return LedgerPolicy()


@pytest.fixture
def narrow_policy() -> LedgerPolicy:
    """
    Provide an 8-bit ledger policy (max balance 255)

    Makes the overflow boundary reachable with small literal numbers.
    """
    return LedgerPolicy(balance_bits=8)


@pytest.fixture
def ledger(ledger_policy: LedgerPolicy, id_factory: FixedIdFactory) -> Ledger:
    """Provide a ledger with alice holding the full supply of 1000"""
    return Ledger("alice", 1000, policy=ledger_policy, id_factory=id_factory)
