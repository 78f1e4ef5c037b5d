"""Services Layer — async orchestration around the pure core.

Invariants:
    - Services talk to IO only through core.repository_protocols types
    - Business rules stay in core/; services sequence calls and raise typed errors

Design Decisions:
    - Impureim sandwich: read via protocol, decide in core, write/issue via protocol
"""
