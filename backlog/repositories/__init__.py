"""Data Access Layer — repositories over the Project, Task and ActivityLog tables.

Invariants:
    - Implement the Protocols in core/repository_protocols.py
    - Store failures surface as StoreError, zero-row lookups as NotFoundError

Design Decisions:
    - One repository per entity kind, sharing base.SqlRepository
"""
