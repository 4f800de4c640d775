"""Subset-sum problems: reachability, partitions, counting and enumeration."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

MOD = 1_000_000_007


def _require_items(items: Sequence[int], name: str) -> None:
    if not items:
        raise ValueError(f"{name} must not be empty")
    if any(item < 0 for item in items):
        raise ValueError(f"{name} must hold non-negative integers")


def _require_target(target: int, name: str) -> None:
    if target < 0:
        raise ValueError(f"{name} must not be negative, got {target}")


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


def _reachable_sums(items: Sequence[int], limit: int, first_reaches_zero: bool) -> list[bool]:
    first = items[0]
    row = [first == j for j in range(limit + 1)]
    row[0] = first_reaches_zero
    for item in items[1:]:
        row = [True] + [
            row[j] or (item <= j and row[j - item]) for j in range(1, limit + 1)
        ]
    return row


def _count_sums(items: Sequence[int], total: int, zero_first_counts_twice: bool) -> int:
    first = items[0]
    row = [1] + [1 if first == j else 0 for j in range(1, total + 1)]
    if zero_first_counts_twice and first == 0:
        row[0] = 2
    for item in items[1:]:
        row = [1] + [
            row[j] + (row[j - item] if item <= j else 0) for j in range(1, total + 1)
        ]
    return row[total]


def _count_sums_mod(items: Sequence[int], total: int) -> int:
    first = items[0]
    row = [0] * (total + 1)
    for j in range(total + 1):
        if j == 0 and first == 0:
            row[j] = 2
        elif j == 0 or first == j:
            row[j] = 1
    for item in items[1:]:
        row = [
            (row[j] + (row[j - item] if item <= j else 0)) % MOD
            for j in range(total + 1)
        ]
    return row[total]


def subset_sum_to_k(arr: Sequence[int], k: int) -> bool:
    """Return whether some subset of arr sums to k."""
    _require_items(arr, "arr")
    _require_target(k, "k")
    return _reachable_sums(arr, k, True)[k]


def can_partition(nums: Sequence[int]) -> bool:
    """Return whether nums splits into two subsets of equal sum."""
    _require_items(nums, "nums")
    total = sum(nums)
    if total % 2 != 0:
        return False
    half = total // 2
    return _reachable_sums(nums, half, nums[0] == 0)[half]


def min_subset_sum_difference(arr: Sequence[int]) -> int:
    """Return the smallest difference between the sums of a two-way split of arr."""
    _require_items(arr, "arr")
    total = sum(arr)
    reachable = _reachable_sums(arr, total, True)
    return min(abs(total - 2 * s) for s in range(total // 2 + 1) if reachable[s])


def count_partitions(arr: Sequence[int], difference: int) -> int:
    """Count two-way splits of arr whose sums differ by difference, modulo MOD."""
    _require_items(arr, "arr")
    target = _trunc_div(sum(arr) - difference, 2)
    if target < 0:
        raise ValueError("difference exceeds the total of arr")
    return _count_sums_mod(arr, target)


def perfect_sum(arr: Sequence[int], total: int) -> int:
    """Count subsets of arr whose elements add up to total."""
    _require_items(arr, "arr")
    _require_target(total, "total")
    return _count_sums(arr, total, False)


def count_subsets_with_sum_mod(nums: Sequence[int], target: int) -> int:
    """Count subsets of nums that sum to target, modulo MOD."""
    _require_items(nums, "nums")
    _require_target(target, "target")
    return _count_sums_mod(nums, target)


def count_subsequences_with_sum(nums: Sequence[int], target: int) -> int:
    """Count subsequences of nums that sum to target."""
    _require_items(nums, "nums")
    _require_target(target, "target")
    return _count_sums(nums, target, True)


def find_ways(arr: Sequence[int], k: int) -> int:
    """Count subsets of arr that sum to k, modulo MOD."""
    _require_items(arr, "arr")
    _require_target(k, "k")
    return _count_sums_mod(arr, k)


def find_target_sum_ways(nums: Sequence[int], target: int) -> int:
    """Count sign assignments to nums whose signed sum is target.

    The table spans sums 0..target only; a step that needs a sum outside that
    range raises IndexError.
    """
    if not nums:
        raise ValueError("nums must not be empty")
    _require_target(target, "target")

    def cell(row: list[int], j: int) -> int:
        if not 0 <= j <= target:
            raise IndexError(f"sum {j} lies outside the table range 0..{target}")
        return row[j]

    first = nums[0]
    row = [1 if first == j or -first == j else 0 for j in range(target + 1)]
    for item in nums[1:]:
        row = [cell(row, j + item) + cell(row, j - item) for j in range(target + 1)]
    return row[target]


def _walk(nums: Sequence[int], start: int) -> Iterator[list[int]]:
    if start == len(nums):
        yield []
        return
    head = nums[start]
    for tail in _walk(nums, start + 1):
        yield [head, *tail]
    yield from _walk(nums, start + 1)


def subsequences(nums: Sequence[int]) -> list[list[int]]:
    """Return every subsequence of nums, those holding each element before those without it."""
    return list(_walk(nums, 0))


def subsequences_with_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """Return the subsequences of nums whose elements sum to target."""
    return [seq for seq in _walk(nums, 0) if sum(seq) == target]