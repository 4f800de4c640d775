"""Stock trading profits under different transaction rules."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cache


def _require_transactions(k: int) -> None:
    if k < 0:
        raise ValueError(f"k must not be negative, got {k}")


def max_profit_unlimited(prices: Sequence[int]) -> int:
    """Return the best profit with any number of buy/sell pairs, holding one share at most."""
    ahead_can_buy, ahead_holding = 0, 0
    for price in reversed(prices):
        ahead_can_buy, ahead_holding = (
            max(-price + ahead_holding, ahead_can_buy),
            max(price + ahead_can_buy, ahead_holding),
        )
    return ahead_can_buy


def max_profit_unlimited_memo(prices: Sequence[int]) -> int:
    """Return the same result as max_profit_unlimited, computed top-down."""
    n = len(prices)

    @cache
    def best(idx: int, can_buy: bool) -> int:
        if idx == n:
            return 0
        if can_buy:
            return max(-prices[idx] + best(idx + 1, False), best(idx + 1, True))
        return max(prices[idx] + best(idx + 1, True), best(idx + 1, False))

    return best(0, True)


def max_profit_k_transactions(k: int, prices: Sequence[int]) -> int:
    """Return the best profit using at most k completed buy/sell pairs."""
    _require_transactions(k)
    can_buy = [0] * (k + 1)
    holding = [0] * (k + 1)
    for price in reversed(prices):
        can_buy, holding = (
            [0] + [max(-price + holding[cap], can_buy[cap]) for cap in range(1, k + 1)],
            [0] + [max(price + can_buy[cap - 1], holding[cap]) for cap in range(1, k + 1)],
        )
    return can_buy[k]


def max_profit_k_transactions_memo(k: int, prices: Sequence[int]) -> int:
    """Return the same result as max_profit_k_transactions, computed top-down."""
    _require_transactions(k)
    n = len(prices)

    @cache
    def best(idx: int, can_buy: bool, cap: int) -> int:
        if cap == 0 or idx == n:
            return 0
        if can_buy:
            return max(-prices[idx] + best(idx + 1, False, cap), best(idx + 1, True, cap))
        return max(prices[idx] + best(idx + 1, True, cap - 1), best(idx + 1, False, cap))

    return best(0, True, k)


def max_profit_two_transactions(prices: Sequence[int]) -> int:
    """Return the best profit using at most two completed buy/sell pairs."""
    return max_profit_k_transactions(2, prices)


def max_profit_with_cooldown(prices: Sequence[int]) -> int:
    """Return the best profit when every sale is followed by a one-day cooldown."""
    ahead_can_buy, ahead_holding = 0, 0
    after_cooldown_can_buy = 0
    for price in reversed(prices):
        can_buy = max(-price + ahead_holding, ahead_can_buy)
        holding = max(price + after_cooldown_can_buy, ahead_holding)
        after_cooldown_can_buy = ahead_can_buy
        ahead_can_buy, ahead_holding = can_buy, holding
    return ahead_can_buy


def max_profit_with_cooldown_memo(prices: Sequence[int]) -> int:
    """Return the same result as max_profit_with_cooldown, computed top-down."""
    n = len(prices)

    @cache
    def best(idx: int, can_buy: bool) -> int:
        if idx >= n:
            return 0
        if can_buy:
            return max(-prices[idx] + best(idx + 1, False), best(idx + 1, True))
        return max(prices[idx] + best(idx + 2, True), best(idx + 1, False))

    return best(0, True)


def max_profit_with_fee(prices: Sequence[int], fee: int) -> int:
    """Return the best profit when every sale costs a fixed fee."""
    ahead_can_buy, ahead_holding = 0, 0
    for price in reversed(prices):
        ahead_can_buy, ahead_holding = (
            max(-price + ahead_holding, ahead_can_buy),
            max(price - fee + ahead_can_buy, ahead_holding),
        )
    return ahead_can_buy