"""
Core radix conversion primitives, domain records and contracts.

This module contains the pure building blocks: digit codec, base-N
decoder/encoder, tagged literal dispatcher and the error taxonomy.
"""
