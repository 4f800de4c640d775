"""Scheduling problems: weighted job scheduling and travel-pass costs."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence

_PASS_LENGTHS = (1, 7, 30)


def job_scheduling(
    start_time: Sequence[int], end_time: Sequence[int], profit: Sequence[int]
) -> int:
    """Return the best total profit of jobs that do not overlap.

    A job may start at the moment another one ends.
    """
    if not len(start_time) == len(end_time) == len(profit):
        raise ValueError("start_time, end_time and profit must have the same length")
    jobs = sorted(zip(start_time, end_time, profit), key=lambda job: job[0])
    starts = [start for start, _, _ in jobs]
    n = len(jobs)
    best = [0] * (n + 1)
    for i in range(n - 1, -1, -1):
        _, end, gain = jobs[i]
        best[i] = max(best[i + 1], gain + best[bisect_left(starts, end)])
    return best[0]


def mincost_tickets(days: Sequence[int], costs: Sequence[int]) -> int:
    """Return the cheapest way to cover the sorted travel days with 1-, 7- and 30-day passes."""
    if not days:
        raise ValueError("days must not be empty")
    if len(costs) != len(_PASS_LENGTHS):
        raise ValueError(f"costs must hold {len(_PASS_LENGTHS)} prices")
    n = len(days)
    best = [0] * (n + 1)
    best[n - 1] = min(costs)
    for i in range(n - 2, -1, -1):
        best[i] = min(
            cost + best[i + 1 if length == 1 else bisect_right(days, days[i] + length - 1)]
            for cost, length in zip(costs, _PASS_LENGTHS)
        )
    return best[0]