"""
Core geometry primitives, numerical safeguards, and contracts.

This module contains the foundational building blocks that are independent
of the solid-modeling algorithms built on top of them.
"""
