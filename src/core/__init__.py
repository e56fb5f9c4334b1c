"""
Core digit algebra, domain models, and contracts.

This module contains the foundational building blocks: pure integer
algorithms over u64 palindromes and the immutable values built on them.
"""
