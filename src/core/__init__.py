"""
Core arithmetic, error taxonomy, key configuration and contracts.

This module contains the foundational building blocks that are independent
of text framing and I/O.
"""
