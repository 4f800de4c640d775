"""One-dimensional problems: Fibonacci, house robbers, frog and jump games, LIS."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

UNREACHABLE = 10**9


def _require_items(items: Sequence[int], name: str) -> None:
    if not items:
        raise ValueError(f"{name} must not be empty")


def _require_non_negative_items(items: Sequence[int], name: str) -> None:
    _require_items(items, name)
    if any(item < 0 for item in items):
        raise ValueError(f"{name} must hold non-negative integers")


@dataclass
class TreeNode:
    """A binary tree node holding an integer value."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def fib(n: int) -> int:
    """Return the n-th Fibonacci number; values below 1 are returned unchanged."""
    if n < 1:
        return n
    previous, current = 0, 1
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


def rob(nums: Sequence[int]) -> int:
    """Return the most that can be taken from a row of houses, never two adjacent."""
    _require_items(nums, "nums")
    next_one, next_two = nums[-1], 0
    for amount in reversed(nums[:-1]):
        next_one, next_two = max(amount + next_two, next_one), next_one
    return next_one


def rob_circular(nums: Sequence[int]) -> int:
    """Return the most that can be taken from houses in a circle, never two adjacent."""
    _require_items(nums, "nums")
    if len(nums) == 1:
        return nums[0]
    return max(rob(nums[1:]), rob(nums[:-1]))


def rob_tree(root: TreeNode | None) -> int:
    """Return the most that can be taken from a tree of houses, never parent and child."""

    def visit(node: TreeNode | None) -> tuple[int, int]:
        if node is None:
            return 0, 0
        left_with, left_without = visit(node.left)
        right_with, right_without = visit(node.right)
        with_node = node.val + left_without + right_without
        without_node = max(left_with, left_without) + max(right_with, right_without)
        return with_node, without_node

    return max(visit(root))


def frog_jump_k(heights: Sequence[int], k: int) -> int:
    """Return the least energy to reach the last stone, jumping up to k stones at a time.

    A jump costs the absolute height difference between its stones.
    """
    _require_items(heights, "heights")
    if k < 1:
        raise ValueError(f"k must be at least 1, got {k}")
    costs = [0]
    for i, height in enumerate(heights[1:], start=1):
        costs.append(
            min(
                costs[i - step] + abs(height - heights[i - step])
                for step in range(1, min(k, i) + 1)
            )
        )
    return costs[-1]


def frog_jump(heights: Sequence[int]) -> int:
    """Return the least energy to reach the last stone, jumping one or two stones."""
    return frog_jump_k(heights, 2)


def can_jump(nums: Sequence[int]) -> bool:
    """Return whether the last index is reachable, nums[i] being the longest jump from i."""
    _require_non_negative_items(nums, "nums")
    reachable = [False] * len(nums)
    reachable[-1] = True
    for i in range(len(nums) - 2, -1, -1):
        reachable[i] = any(reachable[i + 1 : i + nums[i] + 1])
    return reachable[0]


def min_jumps(nums: Sequence[int]) -> int:
    """Return the fewest jumps from the first index to the last.

    A value of UNREACHABLE or more means the last index cannot be reached.
    """
    _require_non_negative_items(nums, "nums")
    n = len(nums)
    steps = [0] * n
    for i in range(n - 2, -1, -1):
        reach = nums[i]
        if reach == 0:
            steps[i] = UNREACHABLE
        else:
            steps[i] = 1 + min(steps[i + 1 : i + reach + 1])
    return steps[0]


def length_of_lis(nums: Sequence[int]) -> int:
    """Return the length of the longest strictly increasing subsequence of nums."""
    _require_items(nums, "nums")
    # bound None stands for "no following element", i.e. no upper limit.
    bounds: list[int | None] = [*nums, None]
    first = nums[0]
    row = [1 if bound is None or first < bound else 0 for bound in bounds]
    for i, value in enumerate(nums[1:], start=1):
        with_value = 1 + row[i]
        row = [
            max(prev, with_value) if bound is None or value < bound else prev
            for prev, bound in zip(row, bounds)
        ]
    return row[-1]