"""leetcode_py - normalized LeetCode API records and a small CLI."""

__version__ = "1.0.0"
