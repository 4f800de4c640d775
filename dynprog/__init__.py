"""Classic dynamic programming solutions: knapsack, subsets, stocks, sequences,
strings, palindromes, grids, scheduling and graphs."""

__version__ = "0.1.0"