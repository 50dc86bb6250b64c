"""
Hull algorithms operating on the MODEL primitives.
"""
