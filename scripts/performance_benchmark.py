#!/usr/bin/env python3
"""
Performance Benchmark for the token ledger

Measures the hot paths of the ledger:

- balance_of: existing and never-credited addresses
- transfer: successful and insufficient-balance calls, each on a fresh ledger

Every ledger call passes through the metrics decorator, so the numbers
include metrics overhead. Mutation logging is switched off.

Run:
    python scripts/performance_benchmark.py
"""

from token_ledger import Ledger, LedgerPolicy, TokenError
from token_ledger.kernel.logging import LogOperation, configure_logging, get_logger

logger = get_logger(__name__)

BENCH_POLICY = LedgerPolicy(log_mutations=False)


def report(test: str, op: LogOperation, target: float) -> dict:
    """Print and return a benchmark result"""
    iterations = op.count or 0
    elapsed = op.elapsed_seconds
    ops_per_sec = op.ops_per_sec()

    print(f"  Iterations: {iterations}")
    print(f"  Time elapsed: {elapsed:.3f}s")
    print(f"  Ops/sec: {ops_per_sec:,.0f}")
    print(f"  Target: >{target:,.0f} ops/sec")
    print(f"  Status: {'✓ PASS' if ops_per_sec > target else '✗ FAIL'}")

    return {
        "test": test,
        "iterations": iterations,
        "elapsed_sec": elapsed,
        "ops_per_sec": ops_per_sec,
        "target": target,
        "pass": ops_per_sec > target,
    }


def benchmark_balance_of(address: str, label: str) -> dict:
    """Benchmark balance lookups"""
    print(f"\n=== Benchmark: balance_of {label} address ===")

    ledger = Ledger("alice", 1_000_000, policy=BENCH_POLICY)
    iterations = 200_000

    with LogOperation(logger, f"balance_of_{label}", count=iterations) as op:
        for _ in range(iterations):
            ledger.balance_of(address)

    return report(f"balance_of_{label}", op, target=1_000_000)


def benchmark_transfer(initial_supply: int, amount: int, label: str) -> dict:
    """Benchmark one transfer per fresh ledger"""
    print(f"\n=== Benchmark: transfer {label} ===")

    iterations = 20_000
    ledgers = [
        Ledger("alice", initial_supply, policy=BENCH_POLICY) for _ in range(iterations)
    ]
    rejected = 0

    with LogOperation(logger, f"transfer_{label}", count=iterations) as op:
        for ledger in ledgers:
            try:
                ledger.transfer("alice", "bob", amount)
            except TokenError:
                rejected += 1

    print(f"  Rejected: {rejected}")
    return report(f"transfer_{label}", op, target=20_000)


def main() -> None:
    """Run all benchmarks"""
    configure_logging(json_output=False, log_level="WARNING")

    print("\n" + "=" * 70)
    print("  Token Ledger - Performance Benchmark Suite")
    print("=" * 70)

    results = []

    results.append(benchmark_balance_of("alice", "existing"))
    results.append(benchmark_balance_of("unknown", "missing"))
    results.append(benchmark_transfer(1_000_000, 100, "success"))
    results.append(benchmark_transfer(100, 200, "insufficient_balance"))

    print("\n" + "=" * 70)
    print("  Summary")
    print("=" * 70)

    passed = sum(1 for r in results if r["pass"])
    total = len(results)

    for result in results:
        status = "✓ PASS" if result["pass"] else "✗ FAIL"
        print(f"  {result['test']:30s} {status}")

    print(f"\n  Benchmarks passed: {passed}/{total}")

    if passed == total:
        print("\n  ✓✓✓ All performance targets met!")
    else:
        print("\n  ⚠️ Some performance targets not met (see details above)")

    print("\n" + "=" * 70 + "\n")


if __name__ == "__main__":
    main()
