"""
Core primitives for validated value objects.

Error taxonomy, invariant predicates, result-style wrappers and the
example domain models.
"""
