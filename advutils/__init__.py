"""Utilities for control loops and embedded-style code: IIR filters, PID, button debouncing, events, bounded containers and string hashes."""

__version__ = "0.1.0"

__all__ = [
    "basic_math",
    "button",
    "event",
    "hash_functions",
    "iir_filters",
    "linked_list",
    "lk_hash_table",
    "lp_hash_table",
    "pid",
]