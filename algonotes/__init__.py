"""Classic algorithms and data structures: arrays, sorting, recursion, star
patterns, graphs, disjoint sets, heaps, binary search trees and tries."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "sorting",
    "recursion",
    "patterns",
    "graphs",
    "disjoint_set",
    "heap",
    "bst",
    "trie",
]