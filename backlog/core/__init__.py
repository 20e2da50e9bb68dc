"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, repositories/ or db/
    - All functions are pure and deterministic (current time is passed in, never read)

Design Decisions:
    - Functional core separated from imperative shell: handlers fetch rows,
      core decides field changes, handlers write them back
"""
