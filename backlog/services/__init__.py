"""Services Layer — tool handlers, activity recording, and tool dispatch.

Invariants:
    - Handlers split by entity (max 4 methods each)
    - Tool dispatch uses explicit dict mapping (no auto-discovery)

Design Decisions:
    - One handler file per entity/concern for locality
"""
