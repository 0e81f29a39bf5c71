"""Classic algorithm routines on lists, strings, grids, bits, linked lists, trees and graphs."""

__version__ = "0.1.0"

__all__ = ["arrays", "bits", "graphs", "grids", "linked", "strings", "trees"]