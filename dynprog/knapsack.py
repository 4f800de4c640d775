"""Knapsack-style optimisation: 0/1 knapsack, coin change and rod cutting."""

from __future__ import annotations

from collections.abc import Sequence

_UNREACHABLE = 10**9


def _require_items(items: Sequence[int], name: str) -> None:
    if not items:
        raise ValueError(f"{name} must not be empty")


def _require_non_negative(value: int, name: str) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def knapsack(weights: Sequence[int], values: Sequence[int], max_weight: int) -> int:
    """Return the best total value of items whose combined weight fits in max_weight.

    Each item may be taken at most once.
    """
    _require_items(weights, "weights")
    if len(values) != len(weights):
        raise ValueError("weights and values must have the same length")
    _require_non_negative(max_weight, "max_weight")

    first_weight, first_value = weights[0], values[0]
    row = [first_value if first_weight <= j else 0 for j in range(max_weight + 1)]

    for weight, value in zip(weights[1:], values[1:]):
        current = [0] * (max_weight + 1)
        for j in range(1, max_weight + 1):
            best = row[j]
            if weight <= j:
                best = max(best, value + row[j - weight])
            current[j] = best
        row = current

    return row[max_weight]


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Return the fewest coins summing to amount, or -1 if it cannot be made.

    Every coin denomination may be used any number of times.
    """
    _require_items(coins, "coins")
    _require_non_negative(amount, "amount")

    first = coins[0]
    row = [j // first if j % first == 0 else _UNREACHABLE for j in range(amount + 1)]

    for coin in coins[1:]:
        for j in range(1, amount + 1):
            if coin <= j:
                row[j] = min(row[j], 1 + row[j - coin])

    return -1 if row[amount] >= _UNREACHABLE else row[amount]


def coin_change_ways(amount: int, coins: Sequence[int]) -> int:
    """Return the number of coin combinations that sum to amount."""
    _require_items(coins, "coins")
    _require_non_negative(amount, "amount")

    first = coins[0]
    row = [1] + [1 if j % first == 0 else 0 for j in range(1, amount + 1)]

    for coin in coins[1:]:
        for j in range(1, amount + 1):
            if coin <= j:
                row[j] += row[j - coin]

    return row[amount]


def cut_rod(prices: Sequence[int], length: int) -> int:
    """Return the best price for a rod of the given length from a table of piece prices.

    prices[i] is the price of a piece of length i + 1.
    """
    _require_items(prices, "prices")
    _require_non_negative(length, "length")

    row = [0] + [prices[0] * length] * length

    for size_index, price in enumerate(prices[1:], start=1):
        current = [0] * (length + 1)
        for j in range(1, length + 1):
            best = row[j]
            if size_index + 1 <= j:
                best = max(best, price + current[j - size_index + 1])
            current[j] = best
        row = current

    return row[length]