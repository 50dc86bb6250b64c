"""
The MODEL layer contains pure data structures and helpers.
It deals with geometric primitives, tolerance-aware predicates, and I/O.
"""
