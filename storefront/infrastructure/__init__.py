"""Infrastructure Layer — database, token signing and logging adapters.

Invariants:
    - Infrastructure implements core protocols; core never imports infrastructure
    - All driver/library failures are mapped to core.errors types at this boundary
"""
